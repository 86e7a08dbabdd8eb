import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from bookbuild.core.release.abc import PinnedRelease

CONFIG_FILENAME = "bookbuild.toml"

DEFAULT_BOOK_DIR = "book"
DEFAULT_PREBUILD = ("./ci/build-highlight-js",)
DEFAULT_TOOL_NAME = "mdbook"
DEFAULT_TOOL_VERSION = "v0.3.1"
DEFAULT_TOOL_PLATFORM = "x86_64-unknown-linux-gnu"
DEFAULT_URL_TEMPLATE = (
    "https://github.com/rust-lang-nursery/mdBook/releases/download/"
    "{version}/{name}-{version}-{platform}.tar.gz"
)


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `bookbuild.toml`."""

    book_dir: Path
    prebuild: tuple[str, ...]
    release: PinnedRelease
    source: Path | None  # None when running on built-in defaults

    @property
    def tool_name(self) -> str:
        return self.release.name


def default_config() -> LoadedConfig:
    """Return the built-in configuration used when no config file exists."""
    return LoadedConfig(
        book_dir=Path(DEFAULT_BOOK_DIR),
        prebuild=DEFAULT_PREBUILD,
        release=PinnedRelease(
            name=DEFAULT_TOOL_NAME,
            version=DEFAULT_TOOL_VERSION,
            platform=DEFAULT_TOOL_PLATFORM,
            url_template=DEFAULT_URL_TEMPLATE,
        ),
        source=None,
    )


def _require_str(data: dict, key: str, default: str, cfg_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty string in {cfg_path}")
    return value


def load_config(config_dir: Path) -> LoadedConfig:
    """Load bookbuild.toml from the given directory if present; otherwise return defaults.

    Example config:
      book_dir = "book"
      prebuild = ["./ci/build-highlight-js"]

      [tool]
      name = "mdbook"
      version = "v0.3.1"
      platform = "x86_64-unknown-linux-gnu"

    Raises:
        ValueError: If a key has the wrong type, prebuild is empty or url_template
            cannot be formatted
    """
    cfg_path = config_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return default_config()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    book_dir = _require_str(data, "book_dir", DEFAULT_BOOK_DIR, cfg_path)

    prebuild = data.get("prebuild", list(DEFAULT_PREBUILD))
    if not isinstance(prebuild, list) or not prebuild:
        raise ValueError(f"'prebuild' must be a non-empty list of strings in {cfg_path}")
    if not all(isinstance(x, str) for x in prebuild):
        raise ValueError(f"'prebuild' must be a non-empty list of strings in {cfg_path}")

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ValueError(f"'tool' must be a table in {cfg_path}")

    release = PinnedRelease(
        name=_require_str(tool, "name", DEFAULT_TOOL_NAME, cfg_path),
        version=_require_str(tool, "version", DEFAULT_TOOL_VERSION, cfg_path),
        platform=_require_str(tool, "platform", DEFAULT_TOOL_PLATFORM, cfg_path),
        url_template=_require_str(tool, "url_template", DEFAULT_URL_TEMPLATE, cfg_path),
    )
    try:
        release.url  # noqa: B018
    except (AttributeError, IndexError, KeyError, ValueError) as e:
        raise ValueError(
            f"'url_template' must only use {{name}}, {{version}} and {{platform}} "
            f"in {cfg_path} ({e!r})"
        ) from e

    return LoadedConfig(
        book_dir=Path(book_dir),
        prebuild=tuple(prebuild),
        release=release,
        source=cfg_path,
    )


def save_config(config_dir: Path, config: LoadedConfig) -> Path:
    """Save LoadedConfig to bookbuild.toml using tomlkit.

    Returns:
        Path of the written file
    """
    cfg_path = config_dir / CONFIG_FILENAME

    doc = tomlkit.document()
    doc.add(tomlkit.comment("bookbuild configuration"))
    doc["book_dir"] = config.book_dir.as_posix()
    doc["prebuild"] = list(config.prebuild)

    tool = tomlkit.table()
    tool["name"] = config.release.name
    tool["version"] = config.release.version
    tool["platform"] = config.release.platform
    tool["url_template"] = config.release.url_template
    doc["tool"] = tool

    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return cfg_path
