# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Literal, TypeVar, Union

import click
import tomli
from fstabkit.fstab.errors import FstabError
from typeguard import typechecked
from typing_extensions import ParamSpec

logger = logging.getLogger(__name__)

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_CONFIG_PATH = "/etc/fstabkit/config.toml"

log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="WARNING",
    show_default=True,
    help="Logging verbosity level.",
)

log_file_option = click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this (rotated) file instead of stderr.",
)

dry_run_option = click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    default=False,
    help="Print the result to STDOUT instead of writing the file.",
)

strict_option = click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on the first line that does not fit the detected dialect instead of skipping it.",
)

fstab_argument = click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
)


@typechecked
def ensure_dict(x: Any) -> Dict[str, Any]:
    return x


_Tv = TypeVar("_Tv")
_ClickCallback = Callable[[click.Context, click.Parameter, _Tv], None]


def _set_default_map(name: str) -> _ClickCallback[Path]:
    @typechecked
    def cb(ctx: click.Context, param: click.Parameter, path: Path) -> None:
        if not path.exists() or path == Path("/dev/null"):
            return

        logger.info(f"Reading config from {path}...")
        with path.open("rb") as f:
            try:
                conf = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise click.BadParameter(
                    f"{path} does not contain valid TOML.",
                    ctx=ctx,
                    param=param,
                ) from e
        try:
            default_map = ensure_dict(conf[name])
        except KeyError as e:
            raise click.BadParameter(
                f"'{name}' is not a top-level table name in {path}. Valid names: {list(conf.keys())}",
                ctx=ctx,
                param=param,
            ) from e
        logger.info(f"Loaded table '{name}'.")

        ctx.default_map = {**(ctx.default_map or {}), **default_map}

    return cb


_P = ParamSpec("_P")
_R = TypeVar("_R")


def toml_config_option(
    name: str,
    *,
    default_config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Load default option values from a TOML config file.
    Adds an eager `--config` option to the given command which takes a path. A
    non-existent path or `/dev/null` is treated as an empty table.

    Precedence (lowest to highest):
    * `default` argument to `click.option`
    * the value in the config file
    * value passed at the command line

    Used on the command group, subtables configure subcommands, e.g.
    `[fstabkit.show]` sets defaults for `fstabkit show`.
    """

    def decorator(f: Callable[_P, _R]) -> Callable[_P, _R]:
        return click.option(
            "--config",
            type=click.Path(dir_okay=False, path_type=Path),
            callback=_set_default_map(name),
            default=default_config_path,
            show_default=True,
            is_eager=True,
            expose_value=False,
            help=(
                f"Load option values from table '{name}' in the given TOML config file. "
                "A non-existent path or '/dev/null' are ignored and treated as empty tables."
            ),
        )(f)

    return decorator


@contextmanager
def fstab_errors_as_click() -> Iterator[None]:
    """Report library errors as a one line CLI error (exit status 1)."""
    try:
        yield
    except FstabError as e:
        raise click.ClickException(str(e)) from e
