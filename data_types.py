from dataclasses import dataclass


@dataclass
class ListOptions:
    width: int
    height: int
    left: int = 0
    top: int = 0
    label: str = ''


@dataclass
class KeyEvent:
    name: str


@dataclass
class SelectInfo:
    key_name: str
