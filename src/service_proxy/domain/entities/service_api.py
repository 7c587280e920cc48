from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class ServiceApi:
    method: str
    path: str

    @classmethod
    def coerce(cls, value: Union["ServiceApi", Tuple[str, str]]) -> "ServiceApi":
        """
        Accept a ServiceApi or a (method, path) pair.
        Method and path are not validated here; a bad path only
        surfaces when a request is sent.
        """
        if isinstance(value, ServiceApi):
            return value

        method, path = value
        return cls(method=method, path=path)
