class NetshLeasesError(Exception):
    """Базовое исключение пакета."""


class LeaseParseError(NetshLeasesError):
    """Строку отчёта не удалось разобрать в запись аренды."""

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message)
        self.line = line


class MalformedLineError(LeaseParseError):
    """Нет ожидаемого разделителя или колонки с фиксированным смещением."""


class AmbiguousMatchError(LeaseParseError):
    """В строке больше одного совпадения для поля (MAC или тип)."""


class MissingFieldError(LeaseParseError):
    """Обязательное поле (MAC или тип) в строке не найдено."""


class NetshCommandError(NetshLeasesError):
    def __init__(self, message: str, returncode: int | None = None, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
