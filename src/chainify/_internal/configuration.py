from dataclasses import dataclass


@dataclass(slots=True, kw_only=True, frozen=True)
class ControllerConfiguration:
    name: str
    strict: bool = False
