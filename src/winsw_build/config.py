"""Representation of the user supplied service configuration.

The configuration is usually loaded from a json file and is deliberately
loosely typed: ``flags`` and ``dependencies`` may be given either as a single
string or as a list, ``env`` either as a single mapping or as a list of
mappings. The functions :py:func:`split_flags`,
:py:func:`split_dependencies` and :py:func:`normalize_env` convert these into
lists before the descriptor is assembled.

"""

import enum
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

#: flag passed to the runtime if the configuration does not specify any
DEFAULT_FLAG = "--harmony"


class InvalidConfigError(ValueError):
    """Raised when the service configuration lacks one of the required
    fields ``id``, ``name`` or ``script``.

    """

    def __init__(
        self,
        message: str = "WinSW must be configured with a minimum of id, name and script",
    ) -> None:
        super().__init__(message)


@enum.unique
class LogMode(enum.StrEnum):
    """Log modes understood by WinSW."""

    #: rotate the log files (default)
    ROTATE = enum.auto()
    #: truncate the log on startup
    RESET = enum.auto()
    #: move the old log to ``.old``
    ROLL = enum.auto()
    #: keep appending to the existing log
    APPEND = enum.auto()

    @staticmethod
    def is_known(val: str) -> bool:
        return val in list(LogMode)


@dataclass(frozen=True)
class EnvPair:
    """An environment variable that is passed to the supervised process."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass(frozen=True)
class LogOnAs:
    """Credentials of the account under which the service runs."""

    account: str | None = None
    password: str | None = None
    domain: str | None = None

    @property
    def is_complete(self) -> bool:
        """Only a fully populated set of credentials is used, partial ones are
        dropped silently.

        """
        return bool(self.account and self.password and self.domain)


@dataclass(kw_only=True, frozen=True)
class ServiceConfig:
    """Service configuration as supplied by the user, see :py:meth:`from_dict`."""

    #: unique identifier of the service, alphanumeric without spaces
    id: str | None = None

    #: human readable name of the service
    name: str | None = None

    #: absolute path to the script that is run by the service
    script: str | None = None

    #: description that is shown in the service manager
    description: str | None = None

    #: flags passed to the runtime before the script, either a space
    #: delimited string or a list of flags
    flags: str | Sequence[str] | None = None

    #: one of :py:class:`LogMode`, unknown values are passed on as is
    logmode: str | None = None

    #: directory into which WinSW writes the logs
    logpath: str | None = None

    #: comma delimited string or list of services this one depends on
    dependencies: str | Sequence[str] | None = None

    #: environment variables of the supervised process
    env: EnvPair | Sequence[EnvPair] | None = None

    #: logon credentials of the service
    logOnAs: LogOnAs | None = None

    #: working directory of the service, defaults to the current working
    #: directory of the process creating the descriptor
    workingdirectory: str | None = None

    @staticmethod
    def from_dict(data: Mapping[str, Any] | None) -> "ServiceConfig | None":
        """Creates a :py:class:`ServiceConfig` from a loosely typed mapping,
        e.g. a parsed json document.

        Unknown keys are ignored and no validation is performed, that is
        deferred to :py:func:`~winsw_build.document.build_document`.

        """
        if data is None:
            return None

        env = data.get("env")
        if isinstance(env, Mapping):
            env = EnvPair(
                name=_as_str(env.get("name")), value=_as_str(env.get("value"))
            )
        elif env is not None:
            env = [
                EnvPair(name=_as_str(e.get("name")), value=_as_str(e.get("value")))
                for e in env
            ]

        log_on_as = data.get("logOnAs")
        if isinstance(log_on_as, Mapping):
            log_on_as = LogOnAs(
                account=_as_str(log_on_as.get("account")),
                password=_as_str(log_on_as.get("password")),
                domain=_as_str(log_on_as.get("domain")),
            )

        return ServiceConfig(
            id=_as_str(data.get("id")),
            name=_as_str(data.get("name")),
            script=_as_str(data.get("script")),
            description=_as_str(data.get("description")),
            flags=data.get("flags"),
            logmode=_as_str(data.get("logmode")),
            logpath=_as_str(data.get("logpath")),
            dependencies=data.get("dependencies"),
            env=env,
            logOnAs=log_on_as,
            workingdirectory=_as_str(data.get("workingdirectory")),
        )


def _as_str(val: Any) -> str | None:
    """Converts json scalars like numbers to strings, ``None`` is kept."""
    return None if val is None else str(val)


def _split(val: str | Sequence[str], sep: str) -> list[str]:
    if isinstance(val, str):
        return val.split(sep)
    return list(val)


def split_flags(flags: str | Sequence[str] | None) -> list[str]:
    """Returns the flags as a list, a string is split on single spaces.

    Only a missing value or an empty string fall back to
    :py:const:`DEFAULT_FLAG`, an empty list results in no flags at all.

    """
    if flags is None or flags == "":
        flags = DEFAULT_FLAG
    return _split(flags, " ")


def split_dependencies(dependencies: str | Sequence[str] | None) -> list[str]:
    """Returns the stripped service dependencies as a list, a string is split
    on commas.

    """
    if not dependencies:
        return []
    return [str(dep).strip() for dep in _split(dependencies, ",")]


def normalize_env(env: EnvPair | Sequence[EnvPair] | None) -> list[EnvPair]:
    if not env:
        return []
    if isinstance(env, EnvPair):
        return [env]
    return list(env)
