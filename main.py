#!/usr/bin/env python3
# main.py - 程序入口：启动图形界面、交互式命令行，或执行一次转换

import argparse
import sys
from typing import List, Optional

from ipconv import Notation
from log_setup import configure_debug
from settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ipconv', description='Converts IPv4 addresses between dotted-decimal, binary, hexadecimal, octal and integer notations.')
    parser.add_argument("-c", "--config", required=False, default=None, type=str, help="YAML file overriding the default settings")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    subparsers = parser.add_subparsers(dest='interface_type', help='The interface to launch (default: gui)')

    subparsers.add_parser('gui', help='launch the desktop window')
    subparsers.add_parser('cli', help='launch the interactive command line')

    parser_convert = subparsers.add_parser('convert', help='convert one address and exit')
    parser_convert.add_argument("-f", "--from", dest="source", required=True,
                                choices=[n.key for n in Notation], help="notation of VALUE")
    parser_convert.add_argument("value", type=str, help="the address to convert")
    return parser


def run_gui(settings) -> int:
    from PyQt5.QtWidgets import QApplication
    from converter_gui import ConverterGUI

    app = QApplication(sys.argv)
    win = ConverterGUI(settings)
    win.show()
    return app.exec_()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    configure_debug(args.debug, settings['log_level'])

    interface = args.interface_type or 'gui'
    if interface == 'gui':
        return run_gui(settings)

    from converter_cli import ConverterCLI
    from converter_controller import ConverterController

    controller = ConverterController(binary_display=settings['binary_display'], history_size=settings['history_size'])
    cli = ConverterCLI(controller)
    if interface == 'convert':
        return cli.convert_once(Notation.from_key(args.source), args.value)
    cli.launch()
    return 0


if __name__ == "__main__":
    sys.exit(main())
