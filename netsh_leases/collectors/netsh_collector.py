import codecs
import logging
import os
import subprocess
from typing import List

import winrm
from dotenv import load_dotenv

from netsh_leases.exceptions import NetshCommandError

logger = logging.getLogger(__name__)

# cmd.exe пишет в OEM-кодировке консоли (cp866 на русской Windows).
# Для UTF-8 переключаем кодовую страницу перед netsh, как
# [Console]::OutputEncoding = UTF8 делается для PowerShell.
UTF8_CODEPAGE_PREFIX = "chcp 65001 >nul && "
DEFAULT_ENCODING = "utf-8"


def build_show_clients_command(server: str, scope: str) -> str:
    # "show clients 1" добавляет колонку Name
    return f"netsh dhcp server \\\\{server} scope {scope} show clients 1"


def wrap_command(command: str, encoding: str) -> str:
    """С UTF-8 добавляет chcp 65001; с другой кодировкой вывод декодируется как есть."""
    if codecs.lookup(encoding).name == "utf-8":
        return UTF8_CODEPAGE_PREFIX + command
    return command


class LocalRunner:
    """Запускает netsh на этой машине. Блокирующий вызов, без таймаута."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding

    def __call__(self, command: str) -> List[str]:
        command = wrap_command(command, self.encoding)
        logger.debug("[DHCP] Выполняю локально: %s", command)
        result = subprocess.run(command, shell=True, capture_output=True)
        stdout = result.stdout.decode(self.encoding, errors="replace")
        stderr = result.stderr.decode(self.encoding, errors="replace")
        if result.returncode != 0:
            raise NetshCommandError(
                f"netsh завершился с кодом {result.returncode}",
                returncode=result.returncode,
                stdout=stdout,
                stderr=stderr,
            )
        return stdout.splitlines()


class WinRMRunner:
    """Запускает netsh на Windows-хосте через WinRM (cmd, не PowerShell)."""

    def __init__(self, host: str, username: str | None, password: str | None, encoding: str = DEFAULT_ENCODING):
        self.host = host
        self.encoding = encoding
        self.session = winrm.Session(
            f"http://{host}:5985/wsman",
            auth=(username, password),
            transport="ntlm",
            server_cert_validation="ignore",
        )

    def __call__(self, command: str) -> List[str]:
        command = wrap_command(command, self.encoding)
        logger.debug("[DHCP] Выполняю на %s: %s", self.host, command)
        result = self.session.run_cmd(command)
        stdout = result.std_out.decode(self.encoding, errors="replace")
        stderr = result.std_err.decode(self.encoding, errors="replace")
        if result.status_code != 0:
            raise NetshCommandError(
                f"netsh на {self.host} завершился с кодом {result.status_code}",
                returncode=result.status_code,
                stdout=stdout,
                stderr=stderr,
            )
        return stdout.splitlines()


def runner_from_env():
    """WinRM, если задан WINRM_HOST, иначе локальный запуск. Кодировка из NETSH_ENCODING."""
    load_dotenv()
    encoding = os.getenv("NETSH_ENCODING") or DEFAULT_ENCODING
    host = os.getenv("WINRM_HOST")
    if host:
        return WinRMRunner(host, os.getenv("WINRM_USERNAME"), os.getenv("WINRM_PASSWORD"), encoding=encoding)
    return LocalRunner(encoding=encoding)


def collect_clients_raw(server: str, scope: str, runner=None) -> List[str]:
    """Один вызов show clients для scope. Без повторов."""
    if runner is None:
        runner = runner_from_env()

    command = build_show_clients_command(server, scope)
    logger.info("[DHCP] Запрашиваем аренды %s scope %s", server, scope)
    lines = runner(command)
    logger.info("[DHCP] Строк вывода: %d", len(lines))
    return lines
