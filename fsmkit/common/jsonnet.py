import json
import os
from os import PathLike
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar, Union

import colt
from rjsonnet import evaluate_file


def _is_encodable(value: str) -> bool:
    return (value == "") or (value.encode("utf-8", "ignore") != b"")


def _environment_variables() -> Dict[str, str]:
    return {key: value for key, value in os.environ.items() if _is_encodable(value)}


def load_jsonnet(
    filename: Union[str, PathLike],
    ext_vars: Optional[Mapping[str, Any]] = None,
) -> Any:
    """
    Evaluate a Jsonnet file. Environment variables and `ext_vars` are available
    through `std.extVar`, with `ext_vars` taking precedence.
    """

    ext_vars = {**_environment_variables(), **(ext_vars or {})}
    return json.loads(evaluate_file(str(filename), ext_vars=ext_vars))


_T_FromJsonnet = TypeVar("_T_FromJsonnet", bound="FromJsonnet")


class FromJsonnet:
    __COLT_BUILDER__: ClassVar = colt.ColtBuilder(typekey="type")

    @classmethod
    def from_jsonnet(
        cls: Type[_T_FromJsonnet],
        filename: Union[str, PathLike],
        ext_vars: Optional[Mapping[str, Any]] = None,
    ) -> _T_FromJsonnet:
        json_config = load_jsonnet(filename, ext_vars=ext_vars)
        return cls.from_json(json_config)

    @classmethod
    def from_json(cls: Type[_T_FromJsonnet], json_config: Any) -> _T_FromJsonnet:
        obj: _T_FromJsonnet = cls.__COLT_BUILDER__(json_config, cls)
        setattr(obj, "__json_config__", json_config)
        return obj

    def to_json(self) -> Any:
        return getattr(self, "__json_config__")
