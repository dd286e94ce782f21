#!/usr/bin/env python3
"""Command shell over an in-memory BST symbol table (reads STDIN, writes STDOUT)."""

import os
import re
import sys
import shlex
import logging
from typing import List, Callable, Dict, Optional
from bst import BST, OutOfRangeError

# -------------------- Logging --------------------
_logger = logging.getLogger("bst.cli")
if not _logger.handlers:
    _h = logging.StreamHandler(stream=sys.stderr)
    _h.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    _logger.addHandler(_h)
_logger.setLevel(os.getenv("BST_LOG_LEVEL", "WARNING").upper())
_logger.propagate = False

# -------------------- Command & message constants --------------------
CMD_EXIT = "EXIT"

MSG_OK          = "OK"
ERR_SYNTAX      = "ERR syntax"
ERR_UNKNOWN_CMD = "ERR unknown command"
ERR_INVALID_KEY = "ERR invalid key"
ERR_OUT_OF_RANGE = "ERR index out of range"
ERR_INTERNAL    = "ERR internal"

_KEY_RE = re.compile(r"^\S+$")  # no whitespace, non-empty

Table = BST[str]


def _print(line: str) -> None:
    """Write a single line to STDOUT and flush."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def _opt(key: Optional[str]) -> str:
    """Absent keys/values print as an empty line."""
    return "" if key is None else key


def _usage(cmd: str, args: str = "") -> str:
    return f"ERR usage: {cmd} {args}".rstrip()


def _keys_ok(keys: List[str]) -> bool:
    if all(_KEY_RE.match(k) for k in keys):
        return True
    _print(ERR_INVALID_KEY)
    return False


# -------------------- Command handlers --------------------
def handle_put(args: List[str], st: Table) -> None:
    """PUT <key> <value...>  ->  OK"""
    if len(args) < 2:
        _print(_usage("PUT", "<key> <value>"))
        return
    if not _keys_ok(args[:1]):
        return
    st.put(args[0], " ".join(args[1:]))
    _print(MSG_OK)


def handle_get(args: List[str], st: Table) -> None:
    """GET <key>  ->  value | (empty line if missing)"""
    if len(args) != 1:
        _print(_usage("GET", "<key>"))
        return
    _print(_opt(st.get(args[0])))


def handle_del(args: List[str], st: Table) -> None:
    if len(args) != 1:
        _print(_usage("DEL", "<key>"))
        return
    st.delete(args[0])
    _print(MSG_OK)


def handle_delmin(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("DELMIN"))
        return
    st.delete_min()
    _print(MSG_OK)


def handle_delmax(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("DELMAX"))
        return
    st.delete_max()
    _print(MSG_OK)


def handle_contains(args: List[str], st: Table) -> None:
    if len(args) != 1:
        _print(_usage("CONTAINS", "<key>"))
        return
    _print("true" if args[0] in st else "false")


def handle_min(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("MIN"))
        return
    _print(_opt(st.min()))


def handle_max(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("MAX"))
        return
    _print(_opt(st.max()))


def handle_floor(args: List[str], st: Table) -> None:
    if len(args) != 1:
        _print(_usage("FLOOR", "<key>"))
        return
    _print(_opt(st.floor(args[0])))


def handle_ceil(args: List[str], st: Table) -> None:
    if len(args) != 1:
        _print(_usage("CEIL", "<key>"))
        return
    _print(_opt(st.ceiling(args[0])))


def handle_rank(args: List[str], st: Table) -> None:
    if len(args) != 1:
        _print(_usage("RANK", "<key>"))
        return
    _print(str(st.rank(args[0])))


def handle_select(args: List[str], st: Table) -> None:
    """SELECT <index>  ->  key | ERR index out of range"""
    if len(args) != 1:
        _print(_usage("SELECT", "<index>"))
        return
    try:
        index = int(args[0])
    except ValueError:
        _print(_usage("SELECT", "<index>"))
        return
    try:
        _print(st.select(index))
    except OutOfRangeError:
        _print(ERR_OUT_OF_RANGE)


def handle_size(args: List[str], st: Table) -> None:
    if len(args) != 2:
        _print(_usage("SIZE", "<lo> <hi>"))
        return
    _print(str(st.size(args[0], args[1])))


def handle_len(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("LEN"))
        return
    _print(str(len(st)))


def handle_keys(args: List[str], st: Table) -> None:
    """KEYS [<lo> <hi>]  ->  ascending keys, space separated"""
    if len(args) not in (0, 2):
        _print(_usage("KEYS", "[<lo> <hi>]"))
        return
    _print(" ".join(st.keys(*args)))


def handle_level(args: List[str], st: Table) -> None:
    if args:
        _print(_usage("LEVEL"))
        return
    _print(" ".join(st.level_order()))


def handle_show(args: List[str], st: Table) -> None:
    _print(str(st))


def handle_exit(args: List[str], st: Table) -> str:
    """EXIT -> signal main loop to terminate."""
    return CMD_EXIT


DISPATCH: Dict[str, Callable[[List[str], Table], Optional[str]]] = {
    "PUT": handle_put,
    "GET": handle_get,
    "DEL": handle_del,
    "DELMIN": handle_delmin,
    "DELMAX": handle_delmax,
    "CONTAINS": handle_contains,
    "MIN": handle_min,
    "MAX": handle_max,
    "FLOOR": handle_floor,
    "CEIL": handle_ceil,
    "RANK": handle_rank,
    "SELECT": handle_select,
    "SIZE": handle_size,
    "LEN": handle_len,
    "KEYS": handle_keys,
    "LEVEL": handle_level,
    "SHOW": handle_show,
    CMD_EXIT: handle_exit,
}


def _parse_command(line: str) -> Optional[List[str]]:
    """Split a raw input line into tokens (cmd + args) using shell-like rules.

    Returns:
        tokens list on success, or None if parsing fails (e.g., unbalanced quotes).
    """
    try:
        return shlex.split(line)
    except ValueError as e:
        _logger.debug("Unparseable line %r: %s", line, e)
        return None


def run(st: Table) -> int:
    """Process commands from STDIN until EXIT or EOF."""
    while True:
        line = ""
        try:
            raw = sys.stdin.readline()
            if not raw:  # EOF -> clean exit
                return 0
            line = raw.strip()
            if not line:
                continue

            tokens = _parse_command(line)
            if not tokens:
                _print(ERR_SYNTAX)
                continue

            handler = DISPATCH.get(tokens[0].upper())
            if handler is None:
                _print(ERR_UNKNOWN_CMD)
                continue

            if handler(tokens[1:], st) == CMD_EXIT:
                return 0

        except KeyboardInterrupt:
            return 0
        except Exception:
            # Tracebacks go to STDERR at DEBUG; STDOUT only gets the error line.
            _logger.debug("Command %r failed", line, exc_info=True)
            _print(ERR_INTERNAL)


def main(argv: List[str]) -> int:
    """Run the shell on a fresh, empty symbol table."""
    return run(BST())


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
