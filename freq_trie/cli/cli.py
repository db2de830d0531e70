"""
cli.py - command line front end for freq_trie
Features:
- Load one or more word lists ("word" or "word <count>" per line)
- One-shot ranked prefix search (--search) or an interactive session
- Session commands to add, pop and inspect words; every change yields a new
  Trie snapshot, the previous one is dropped
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from freq_trie.core.errors import InvalidKeyError, NotFound
from freq_trie.trie import Trie
from freq_trie.utils.config_manager import Config
from freq_trie.utils.logger_utils import Log, setup_logging
from freq_trie.utils.wordlist import load_wordlist

logger = logging.getLogger(__name__)

HELP = (
    "Type a prefix to search.\n"
    "Commands: /add WORD [N]  /pop KEY  /show KEY  /count  /words  /help  /quit"
)


class CLI:
    """Interactive session over a Trie snapshot."""

    def __init__(self, trie: Optional[Trie] = None, cfg: Optional[Config] = None,
                 console: Optional[Console] = None):
        self.trie = trie if trie is not None else Trie()
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.running = True

    def run(self):
        """
        Main loop: prompt, then either run a /command or search the input.
        Ends on /quit, EOF or Ctrl-C.
        """
        self.console.rule("[bold magenta]freq-trie[/bold magenta]")
        self.console.print(f"[cyan]{HELP}[/cyan]\n")
        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    def handle(self, line: str):
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
            return
        self._search(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        name, _, args = cmd.partition(" ")
        args = args.strip()
        try:
            if name == "/quit":
                self._exit()
            elif name == "/add":
                self._add(args)
            elif name == "/pop":
                self._pop(args)
            elif name == "/show":
                self._show(args)
            elif name == "/count":
                self.console.print(f"[bold]{self.trie.word_count()}[/bold] words")
            elif name == "/words":
                self._display(sorted(self.trie.items()), title="Words")
            elif name == "/help":
                self.console.print(HELP)
            else:
                self.console.print(f"[red]Unknown command:[/red] {name}")
        except (InvalidKeyError, ValueError, TypeError) as e:
            logger.debug("command %r failed: %s", cmd, e)
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    def _add(self, args: str):
        if not args:
            raise ValueError("usage: /add WORD [N]")
        word, frequency = args, 1
        parts = args.rsplit(None, 1)
        if len(parts) == 2 and parts[1].lstrip("-").isdigit():
            word, frequency = parts[0], int(parts[1])
        self.trie = self.trie.add(word, frequency)
        self.console.print(
            f"[green]Added:[/green] {escape(word)} (frequency {self.trie.frequency(word)})"
        )

    def _pop(self, args: str):
        if not args:
            raise ValueError("usage: /pop KEY")
        popped, trie = self.trie.pop(args)
        if popped is None:
            self.console.print(f"[yellow]Not found:[/yellow] {escape(args)}")
            return
        removed = self.trie.word_count() - trie.word_count()
        self.trie = trie
        self.console.print(f"[green]Removed:[/green] {escape(args)} ({removed} words)")

    def _show(self, args: str):
        try:
            node = self.trie.fetch(args)
        except NotFound:
            self.console.print(f"[yellow]Not found:[/yellow] {escape(args)}")
            return
        below = self.trie.search(args) if args else self.trie.words()
        body = "\n".join([
            f"key:       {node.key!r}",
            f"frequency: {node.frequency}",
            f"children:  {', '.join(sorted(node.children)) or '(none)'}",
            f"words:     {len(below)}",
        ])
        self.console.print(Panel(escape(body), title=escape(f"Node {args!r}"), border_style="cyan"))

    # SEARCH/DISPLAY -------------------------------------------------------------
    def _search(self, prefix: str):
        limit = self.cfg["max_results"]
        if self.cfg["ranked"]:
            rows = self.trie.search_ranked(prefix, limit)
        else:
            rows = [(w, self.trie.frequency(w)) for w in self.trie.search(prefix)[:limit]]
        if not rows:
            self.console.print("[dim](no matches)[/dim]")
            return
        self._display(rows, title=f"Matches for {prefix!r}")

    def _display(self, rows, title: str):
        """Show (word, frequency) rows in a table."""
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        for i, (word, freq) in enumerate(rows, 1):
            table.add_row(str(i), escape(word), str(freq))
        self.console.print(table)

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freq-trie", description="Frequency-weighted prefix search over word lists."
    )
    parser.add_argument("wordlists", nargs="*", help="word list files to load")
    parser.add_argument("--search", "-s", help="print matches for PREFIX and exit")
    parser.add_argument("--limit", "-n", type=int, help="max rows to show")
    parser.add_argument("--config", "-c", help="JSON config file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--no-color", action="store_true", help="plain log output")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)
    if args.limit is not None:
        cfg.data["max_results"] = args.limit
    setup_logging(
        level=args.log_level or cfg["log_level"],
        use_color=cfg["color"] and not args.no_color,
    )

    trie = Trie()
    try:
        for path in args.wordlists:
            trie = load_wordlist(path, cfg["word_separator"], trie)
    except OSError as e:
        console.print(f"[red]Cannot read word list:[/red] {e}")
        return 1
    except (InvalidKeyError, ValueError) as e:
        console.print(f"[red]Bad word list:[/red] {e}")
        return 1
    Log.metric("words loaded", len(trie))

    cli = CLI(trie, cfg, console)
    if args.search is not None:
        if args.search:
            cli._search(args.search)
        else:
            cli._display(trie.search_ranked("", cfg["max_results"]), title="Words")
        return 0
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
