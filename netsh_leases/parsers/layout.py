"""
Раскладка отчёта `netsh dhcp server \\\\<server> scope <scope> show clients 1`.

Пример (колонки фиксированной ширины):

    Changed the current scope context to 10.19.10.0 scope.

    Type : N - NONE, D - DHCP B - BOOTP, U - UNSPECIFIED, R - RESERVATION IP
    ============================================================================================
    IP Address      - Subnet Mask    - Unique ID           - Lease Expires        -Type -Name
    ============================================================================================
    10.19.10.8      - 255.255.252.0  - 00-23-24-11-92-30   -NEVER EXPIRES         -D-  ComputerOne

    No of Clients(version 4): 1 in the Scope : 10.19.10.0.
    Command completed successfully.

Шапка и подвал отрезаются по количеству строк, а не по содержимому.
Это хрупко: если netsh поменяет формат (версия ОС, локаль), все смещения
ниже придётся править здесь.
"""
import re

# Служебные строки до данных: контекст, пустая, легенда, ===, заголовки, ===
HEADER_LINES = 6
# После данных: пустая, итог "No of Clients...", "Command completed successfully."
FOOTER_LINES = 3

FIELD_DELIMITER = "-"

# Колонка "Lease Expires" начинается с этой позиции в строке данных
LEASE_EXPIRATION_OFFSET = 56

MAC_ADDRESS_PATTERN = re.compile(r"[0-9A-Fa-f]{2}(?:[:-][0-9A-Fa-f]{2}){5}")
LEASE_TYPE_PATTERN = re.compile(r"-([A-Z])-")

# Итоговая строка пустого scope: "No of Clients(version 4): 0 in the Scope : 10.19.10.0."
# \b не даёт совпасть с "10 in the Scope"
ZERO_RECORDS_PATTERN = re.compile(r"\b0 in the Scope")
