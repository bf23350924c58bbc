import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# {(источник, команда): parse}
parser_registry: Dict[Tuple[str, str], Callable] = {}


def register_parser(source: str, command_slug: str, parser_func: Callable) -> None:
    key = (source, command_slug)
    if key in parser_registry and parser_registry[key] != parser_func:
        logger.warning("Парсер %s/%s переопределён", source, command_slug)
    parser_registry[key] = parser_func


def get_parser(source: str, command_slug: str) -> Optional[Callable]:
    return parser_registry.get((source, command_slug))


def registered_parsers() -> List[Tuple[str, str]]:
    return sorted(parser_registry)
