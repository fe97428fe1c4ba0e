"""Loading `CliConfig` objects from YAML."""

from __future__ import annotations

import dataclasses
import pathlib
from typing import IO, Any, Dict, Mapping, Type, TypeVar, Union

import yaml

from ._config import Arg, CliConfig, Command, Flag

T = TypeVar("T")


def _build(cls: Type[T], data: Any, where: str) -> T:
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping for {where}, got {data!r}.")
    field_names = {field.name for field in dataclasses.fields(cls)}  # type: ignore
    unknown = set(data.keys()) - field_names
    if len(unknown) > 0:
        raise ValueError(f"Unknown keys for {where}: {sorted(unknown)}")
    return cls(**data)


def _command_from_dict(data: Any, index: int) -> Command:
    where = f"commands[{index}]"
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping for {where}, got {data!r}.")
    kwargs: Dict[str, Any] = dict(data)
    kwargs["aliases"] = tuple(kwargs.get("aliases") or ())
    kwargs["examples"] = tuple(kwargs.get("examples") or ())
    kwargs["args"] = tuple(
        _build(Arg, arg, f"{where}.args[{i}]")
        for i, arg in enumerate(kwargs.get("args") or ())
    )
    kwargs["flags"] = tuple(
        _build(Flag, flag, f"{where}.flags[{i}]")
        for i, flag in enumerate(kwargs.get("flags") or ())
    )
    return _build(Command, kwargs, where)


def config_from_dict(data: Any) -> CliConfig:
    """Build a config from plain data, as loaded from YAML or JSON."""
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping at the top level, got {data!r}.")
    kwargs: Dict[str, Any] = dict(data)
    kwargs["commands"] = tuple(
        _command_from_dict(command, i)
        for i, command in enumerate(kwargs.get("commands") or ())
    )
    if "version" in kwargs:
        kwargs["version"] = str(kwargs["version"])
    return _build(CliConfig, kwargs, "config")


def load_config(stream_or_path: Union[str, pathlib.Path, IO[str]]) -> CliConfig:
    """Read a config from a YAML file or stream."""
    if isinstance(stream_or_path, (str, pathlib.Path)):
        with open(stream_or_path, "r") as f:
            data = yaml.safe_load(f)
    else:
        data = yaml.safe_load(stream_or_path)
    return config_from_dict(data)
