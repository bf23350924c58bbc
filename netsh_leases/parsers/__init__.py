# netsh_leases/parsers/__init__.py
from .registry import register_parser, get_parser
from .netsh_clients import NetshClientsParser  # ← выполняет register_parser внутри netsh_clients.py
