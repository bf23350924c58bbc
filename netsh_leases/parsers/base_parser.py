from typing import Any, Dict


class BaseParser:
    """
    Парсер вывода одной команды.
    command_marker: подстрока команды, по которой парсер понимает, что вывод его.
    """
    command_marker: str = ""

    @classmethod
    def accepts(cls, command: str) -> bool:
        return bool(cls.command_marker) and cls.command_marker in command.lower()

    @classmethod
    def parse(cls, command: str, raw_text: str, vendor: str = None) -> Dict[str, Any]:
        raise NotImplementedError("Реализуйте метод parse в наследнике")
