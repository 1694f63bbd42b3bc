"""Per-record-type flag configuration, and the registration table used to look it up."""

import dataclasses
import warnings
from typing import Callable, Dict, Mapping, Optional, Type, TypeVar

from . import _strings
from ._errors import HammerWarning

T = TypeVar("T")

DEFAULT_REST_FIELD = "rest"


@dataclasses.dataclass(frozen=True)
class FlagConfiguration:
    """Static metadata for one record type: short aliases, a description, and the name
    of the field that receives leftover tokens.

    Configurations are immutable; every builder method returns an updated copy, so
    calls can be chained:

        FlagConfiguration.new().short("verbose", "v").desc("Compile things.")
    """

    short_aliases: Mapping[str, str] = dataclasses.field(default_factory=dict)
    description_text: Optional[str] = None
    rest_field_name: str = DEFAULT_REST_FIELD

    @staticmethod
    def new() -> "FlagConfiguration":
        return FlagConfiguration()

    def short(self, name: str, char: str) -> "FlagConfiguration":
        """Register `-<char>` as an alias for the field `name`. Re-registering a field
        overwrites its previous alias."""
        if len(char) != 1:
            raise ValueError(
                f"Alias for {name} must be a single character, but got {char!r}."
            )

        for other_name, other_char in self.short_aliases.items():
            if other_char == char and other_name != name:
                warnings.warn(
                    f"Alias {_strings.short_flag(char)} is registered for both"
                    f" {other_name} and {name}; whichever field is declared first"
                    " will claim it.",
                    category=HammerWarning,
                    stacklevel=2,
                )

        aliases: Dict[str, str] = dict(self.short_aliases)
        aliases[name] = char
        return dataclasses.replace(self, short_aliases=aliases)

    def desc(self, text: str) -> "FlagConfiguration":
        return dataclasses.replace(self, description_text=text)

    def rest_field(self, name: str) -> "FlagConfiguration":
        return dataclasses.replace(self, rest_field_name=name)

    def short_for(self, name: str) -> Optional[str]:
        return self.short_aliases.get(name)

    def description(self) -> Optional[str]:
        return self.description_text


ConfigBuilder = Callable[[FlagConfiguration], FlagConfiguration]


class ConfigRegistry:
    """Registration table mapping record types to their configurations.

    Registries are created and owned by the caller, then passed into `hammer.decode()`,
    `hammer.usage()`, or `hammer.cli()`:

        registry = hammer.ConfigRegistry()
        registry.register(Args, lambda c: c.short("verbose", "v"))
    """

    def __init__(self) -> None:
        self._config_from_type: Dict[type, FlagConfiguration] = {}

    def register(self, cls: type, build: ConfigBuilder) -> FlagConfiguration:
        """Build a configuration for `cls` by applying `build` to an empty
        configuration. Replaces any previous registration for the same type."""
        config = build(FlagConfiguration.new())
        if not isinstance(config, FlagConfiguration):
            raise TypeError(
                f"Configuration builder for {cls.__name__} returned {config!r}, but"
                " should return a FlagConfiguration."
            )
        self._config_from_type[cls] = config
        return config

    def configure(self, build: ConfigBuilder) -> Callable[[Type[T]], Type[T]]:
        """Decorator form of `register()`."""

        def inner(cls: Type[T]) -> Type[T]:
            self.register(cls, build)
            return cls

        return inner

    def configuration_for(self, cls: type) -> FlagConfiguration:
        return self._config_from_type.get(cls, FlagConfiguration.new())

    def __contains__(self, cls: object) -> bool:
        return cls in self._config_from_type


def resolve_configuration(
    cls: type,
    config: Optional[FlagConfiguration],
    registry: Optional[ConfigRegistry],
) -> FlagConfiguration:
    """Pick the configuration for a decode pass. An explicit configuration wins over a
    registry lookup."""
    if config is not None:
        return config
    if registry is not None:
        return registry.configuration_for(cls)
    return FlagConfiguration.new()
