# converter_cli.py
# 命令行界面：单次转换与交互式转换

import shlex
import sys
import logging
from typing import List, Optional, TextIO, Tuple

from converter_controller import ConverterController
from ipconv import Notation

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Command syntax:  <notation> <value>\n"
    f"  notations: {', '.join(n.key for n in Notation)}\n"
    "  other commands: history, clear, help, quit"
)


class ConverterCLI:
    def __init__(self, controller: Optional[ConverterController] = None, out: TextIO = None, err: TextIO = None):
        self.controller = controller or ConverterController()
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.__should_run = False

    def convert_once(self, source: Notation, value: str) -> int:
        """Print every notation of ``value``; returns a process exit code."""
        ok, payload = self.controller.convert_from(source, value)
        if not ok:
            print(f"error: {payload}", file=self.err)
            return 1
        for line in self.controller.format_results(payload):
            print(line, file=self.out)
        return 0

    def _parse(self, cmd: List[str]) -> Tuple[bool, str]:
        if len(cmd) == 0:
            return (True, "")
        verb = cmd[0].lower()

        if verb in ['quit', 'exit']:
            self.__should_run = False
            return (True, "Exiting")
        if verb == 'help':
            return (True, HELP_TEXT)
        if verb == 'history':
            entries = self.controller.get_history()
            if not entries:
                return (True, "(empty)")
            return (True, "\n".join(f"{e['source'].key} {e['input']} -> {e['results'][Notation.DOTTED_DECIMAL]}" for e in entries))
        if verb == 'clear':
            return self.controller.clear_history()

        try:
            source = Notation.from_key(verb)
        except ValueError as e:
            return (False, str(e))
        if len(cmd) != 2:
            return (False, f"{verb}: expected exactly one value")
        ok, payload = self.controller.convert_from(source, cmd[1])
        if not ok:
            return (False, payload)
        return (True, "\n".join(self.controller.format_results(payload)))

    def launch(self, stdin: TextIO = None) -> None:
        stdin = stdin or sys.stdin
        self.__should_run = True
        while self.__should_run:
            print('> ', end='', file=self.out, flush=True)
            try:
                line = stdin.readline()
            except KeyboardInterrupt:
                break
            if not line:
                break
            try:
                ok, retval = self._parse(shlex.split(line))
            except ValueError as e:
                # unbalanced quotes from shlex
                ok, retval = False, str(e)
            if retval:
                print(retval if ok else f"error: {retval}", file=self.out if ok else self.err)
