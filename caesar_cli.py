#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Command line front end for the Caesar shift: encrypt, decrypt, or list all 26 shifts."""

import sys
import argparse
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box

from caesar import ALPHABET_SIZE, CaesarKeyError, Mode, transform, validate_key


# ═══════════════════════════════════════════════════════════════════════════════
# UI (Rich)
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self, verbose: bool = False):
        self.c = Console()
        self.err = Console(stderr=True)
        self.verbose = verbose

    def log_info(self, msg: str):
        """Diagnostics go to stderr and only with --verbose."""
        if self.verbose:
            self.err.print(f"[dim][INFO] {msg}[/dim]", highlight=False)

    def error(self, msg: str):
        self.err.print(f"[bold red]❌ {msg}[/bold red]", highlight=False)

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CAESAR SHIFT[/bold cyan]\n"
            "[dim]a-z • case kept • everything else untouched[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def result(self, text: str, key: int, mode: Mode):
        title = "ENCRYPTED" if mode is Mode.ENCRYPT else "DECRYPTED"
        self.c.print(f"[bold green]💬 {title} TEXT:[/bold green]")
        self.c.print()
        # Text: no markup, no :emoji: codes; soft_wrap: no inserted line breaks
        self.c.print(Text(text), soft_wrap=True)
        self.c.print()
        self.c.print(
            f"[dim]🔑 Key: [bold yellow]{key}[/bold yellow]  "
            f"(effective shift {key % ALPHABET_SIZE})[/dim]"
        )

    def all_shifts(self, rows: List[str]):
        tbl = Table(
            box=box.ROUNDED, show_header=True,
            header_style="bold magenta", title="[bold]All shifts[/bold]"
        )
        tbl.add_column("Key", width=5, style="yellow")
        tbl.add_column("Text")

        for shift, text in enumerate(rows):
            preview = text[:70] + "…" if len(text) > 70 else text
            tbl.add_row(str(shift), Text(preview))

        self.c.print(tbl)

    def ask_multiline(self, prompt: str) -> str:
        """Multi-line input: an empty line or Ctrl+D ends it."""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](empty line = end of input)[/dim]")

        lines = []
        try:
            while True:
                line = input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='caesar',
        description='Caesar shift over a-z: encrypt, decrypt, or list every shift',
    )
    p.add_argument('text', nargs='*', help='Text to process (otherwise stdin or prompt)')
    p.add_argument('-k', '--key', type=int,
                   help='Shift amount, 0 - 999999')
    direction = p.add_mutually_exclusive_group()
    direction.add_argument('-e', '--encrypt', dest='mode', action='store_const',
                           const=Mode.ENCRYPT, help='Shift forward (default)')
    direction.add_argument('-d', '--decrypt', dest='mode', action='store_const',
                           const=Mode.DECRYPT, help='Shift backward')
    p.add_argument('-a', '--all', action='store_true',
                   help='Decrypt with every key 0-25 and show them all')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Print only the resulting text (handy for pipes)')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Diagnostic messages on stderr')
    p.set_defaults(mode=Mode.ENCRYPT)

    args = p.parse_args(argv)
    if args.key is None and not args.all:
        p.error('the following arguments are required: -k/--key (or use --all)')
    return args


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    raw = args.raw
    ui = UI(verbose=args.verbose)

    if args.key is not None:
        try:
            validate_key(args.key)
        except CaesarKeyError as e:
            ui.error(str(e))
            return 1

    # Input
    if args.text:
        text = ' '.join(args.text)
        ui.log_info("text taken from arguments")
    elif not sys.stdin.isatty():
        text = sys.stdin.read()
        # drop only the trailing newline a pipe adds
        if text.endswith('\n'):
            text = text[:-1]
        ui.log_info("text taken from stdin")
    else:
        if raw:
            ui.error("--raw needs the text as an argument or through a pipe")
            return 1
        ui.header()
        text = ui.ask_multiline("Enter the text:")
        if not text:
            return 0

    # --- ALL SHIFTS ---
    if args.all:
        rows = [transform(text, shift, Mode.DECRYPT) for shift in range(ALPHABET_SIZE)]
        if raw:
            for shift, row in enumerate(rows):
                print(f"{shift}\t{row}")
        else:
            ui.all_shifts(rows)
        return 0

    ui.log_info(f"mode={args.mode.value} key={args.key} chars={len(text)}")
    result = transform(text, args.key, args.mode)

    if raw:
        print(result)
    else:
        ui.result(result, args.key, args.mode)
    return 0


def main():
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n👋")
        sys.exit(130)


if __name__ == '__main__':
    main()
