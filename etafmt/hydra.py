"""Functions for configuring duration formatters with hydra."""
from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from typing import Any

from hydra.core.config_store import ConfigStore
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from etafmt.duration import ETA_UNITS, DurationFormatter
from etafmt.units import Unit, UnitsStyle

__all__ = [
    "DurationFormatterConf",
    "GroupRegistration",
    "SchemaRegistration",
    "as_pretty_dict",
    "formatter_from_config",
    "register_formatter_schemas",
]


@dataclass
class DurationFormatterConf:
    """Structured config for :class:`~etafmt.duration.DurationFormatter`.

    The defaults reproduce :func:`~etafmt.duration.format_eta`.
    """

    _target_: str = "etafmt.duration.DurationFormatter"
    allowed_units: list[Unit] = field(default_factory=lambda: list(ETA_UNITS))
    max_unit_count: int = 2
    units_style: UnitsStyle = UnitsStyle.ABBREVIATED


def _clean_up_dict(obj: Any) -> Any:
    """Convert enums to strings and filter out _target_."""
    if isinstance(obj, MutableMapping):
        return {key: _clean_up_dict(value) for key, value in obj.items() if key != "_target_"}
    elif isinstance(obj, list):
        return [_clean_up_dict(value) for value in obj]
    elif isinstance(obj, Enum):
        return str(f"{obj.name}")
    elif OmegaConf.is_config(obj):  # hydra stores lists as omegaconf.ListConfig, so we convert here
        return OmegaConf.to_container(obj, resolve=True, enum_to_str=True)
    return obj


def as_pretty_dict(data_class: object) -> dict:
    """Convert dataclass to a pretty dictionary."""
    return _clean_up_dict(asdict(data_class))  # type: ignore[arg-type]


def formatter_from_config(config: DictConfig | DurationFormatterConf) -> DurationFormatter:
    """Instantiate a formatter from a config node or a :class:`DurationFormatterConf`.

    :raises TypeError: If the config does not describe a :class:`DurationFormatter`.
    """
    if is_dataclass(config):
        config = OmegaConf.structured(config)
    formatter = instantiate(config, _convert_="all")
    if not isinstance(formatter, DurationFormatter):
        raise TypeError(
            f"Config instantiated an object of type '{type(formatter).__name__}', "
            "expected a DurationFormatter."
        )
    return formatter


class GroupRegistration:
    """Registers formatter configs as the options of one hydra config group."""

    def __init__(self, cs: ConfigStore, *, group_name: str, package: str):
        self._cs = cs
        self._group_name = group_name
        self._package = package
        self._names: list[str] = []

    @property
    def names(self) -> list[str]:
        """Names of the options registered so far, in registration order."""
        return list(self._names)

    def add_option(self, config: DurationFormatterConf | type, *, name: str) -> None:
        """Register a formatter config (or a schema class) as an option named ``name``.

        :raises ValueError: If an option called ``name`` was already added to this group.
        """
        if name in self._names:
            raise ValueError(
                f"Option '{name}' is already registered in group '{self._group_name}'."
            )
        self._cs.store(group=self._group_name, name=name, node=config, package=self._package)
        self._names.append(name)

    def add_options(self, configs: Mapping[str, DurationFormatterConf | type]) -> None:
        """Register several options at once, keyed by option name."""
        for name, config in configs.items():
            self.add_option(config, name=name)


class SchemaRegistration:
    """Register hydra schemas.

    :example:
        >>> sr = SchemaRegistration()
        >>> sr.register(DurationFormatterConf, path="eta/eta_schema")
        >>>
        >>> with sr.new_group("schema/eta", target_path="eta") as group:
        >>>    group.add_option(DurationFormatterConf(units_style=UnitsStyle.FULL), name="full")
    """

    def __init__(self) -> None:
        self._cs = ConfigStore.instance()

    def register(self, config: DurationFormatterConf | type, *, path: str) -> None:
        """Register a formatter config or schema as a primary config at ``path``."""
        if "." in path:
            raise ValueError(f"Separate path with '/' and not '.': {path}")

        parts = path.split("/")
        name = parts[-1]
        package = ".".join(parts[:-1])
        self._cs.store(name=name, node=config, package=package)

    @contextmanager
    def new_group(self, group_name: str, *, target_path: str) -> Iterator[GroupRegistration]:
        """Register a new group whose options are placed at ``target_path``."""
        package = target_path.replace("/", ".")
        yield GroupRegistration(self._cs, group_name=group_name, package=package)


def register_formatter_schemas(
    *, group: str = "eta", target_path: str = "eta", registration: SchemaRegistration | None = None
) -> SchemaRegistration:
    """Register one formatter option per :class:`~etafmt.units.UnitsStyle` under ``group``.

    Options are named after the style (``abbreviated``, ``short``, ``full``), so that e.g.
    ``eta=full`` on the command line selects the long-form formatter.

    :param group: Config group to register the options under.
    :param target_path: Where in the primary config the selected option is placed.
    :param registration: Registration to reuse; a new one is created if not given.

    :returns: The registration used.
    """
    sr = SchemaRegistration() if registration is None else registration
    with sr.new_group(group, target_path=target_path) as group_reg:
        group_reg.add_options(
            {str(style): DurationFormatterConf(units_style=style) for style in UnitsStyle}
        )
    return sr
