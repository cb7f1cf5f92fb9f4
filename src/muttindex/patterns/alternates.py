"""List names that are never worth showing in the index.

mutt's %B expando yields the list name for subscribed lists, and the mailbox
name otherwise. Names collected here (for example the name of the inbox
itself) are blanked out of the index line entirely.

The compiled-in default is used unless the caller explicitly loads a YAML
file with ``load_known_alternates``. Accepted file layouts:

    # a bare list
    - ads
    - inbox

    # or a mapping
    alternates:
      - ads
      - inbox
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import yaml

from muttindex.exceptions import ConfigurationError

DEFAULT_NAMES: tuple[str, ...] = ("ads",)


@dataclass(frozen=True, slots=True)
class KnownAlternates:
    """Ordered, immutable collection of suppressed list names.

    Attributes:
        names: The names, in first-seen order, without duplicates.
    """

    names: tuple[str, ...]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "KnownAlternates":
        """Build from any iterable, dropping duplicates but keeping order."""
        return cls(names=tuple(dict.fromkeys(names)))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


DEFAULT_KNOWN_ALTERNATES = KnownAlternates(names=DEFAULT_NAMES)


def load_known_alternates(path: Path | str) -> KnownAlternates:
    """Load alternates from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        KnownAlternates with the names from the file.

    Raises:
        ConfigurationError: If the file is missing, unparseable, or not
            a list of strings.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(message=f"Cannot read alternates file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(message=f"Invalid YAML in alternates file {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("alternates")

    if data is None:
        return KnownAlternates(names=())

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        raise ConfigurationError(message=f"Alternates file {path} must contain a list of names")

    # Names are compared against trimmed list names
    return KnownAlternates.from_names(name.strip() for name in data)
