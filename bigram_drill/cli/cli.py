"""
cli.py - terminal typing drill
Features:
- Serves practice words biased toward the bigrams you keep mistyping
- Line mode: type the shown word and press Enter, every wrong key is charged to its bigram
- /stats shows the weakest bigrams, /dump shows the raw score table
- Uses Rich for tables and formatting
"""

import argparse
import json
import sys
from typing import Callable, List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Prompt
from rich import box

from bigram_drill.core.diagnostics import log_bigram_scores, stats_rows
from bigram_drill.core.session import PracticeSession
from bigram_drill.core.word_source import DEFAULT_WORDS, ListWordSource, load_word_list
from bigram_drill.errors import BigramDrillError
from bigram_drill.utils.config_manager import Config
from bigram_drill.utils.logger_utils import Log, configure_logging

# initialise console for rich output
console = Console()


class CLI:
    """Interactive drill loop around one PracticeSession."""
    def __init__(self,
                 session: PracticeSession,
                 out: Optional[Console] = None,
                 ask: Optional[Callable[..., str]] = None,
                 log: Optional[Log] = None,
                 rounds: int = 0):
        """
        - session: the practice session (store + selector + word source)
        - ask: prompt function, Prompt.ask by default (tests pass a scripted one)
        - rounds: stop after this many words, 0 = until /quit
        """
        self.session = session
        self.console = out or console
        self.ask = ask or Prompt.ask
        self.log = log or Log(echo=False)
        self.rounds = rounds

        self.history: List[dict] = []
        self.running = True

    def run(self):
        """
        Main loop:
        - show the next word
        - read the attempt, or handle a /command
        - charge mistakes to bigrams
        """
        self.console.rule("[bold magenta]Bigram Drill[/bold magenta]")
        self.console.print("[cyan]Type the word shown and press Enter.[/cyan]")
        self.console.print("Commands: /stats /dump /quit\n")

        word = self.session.next_word()
        while self.running:
            try:
                typed = self.ask(f"[bold]{word}[/bold]", default="")
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

            typed = typed.strip()
            if typed.startswith("/"):
                self._handle_command(typed)
                continue

            self._process_attempt(word, typed)
            if self.rounds and len(self.history) >= self.rounds:
                self._exit()
                break
            word = self.session.next_word()

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        cmd = cmd.strip()
        if cmd.startswith("/quit"):
            self._exit()
            return

        if cmd == "/stats":
            self._show_stats()
            return

        if cmd == "/dump":
            self._show_dump()
            return

        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _process_attempt(self, word: str, typed: str):
        with self.log.time_block("evaluate"):
            offsets = self.session.evaluate_attempt(word, typed)
        self.history.append({"word": word, "typed": typed, "mistakes": len(offsets)})

        if not offsets:
            self.console.print("[green]ok[/green]")
        else:
            self.console.print(self._highlight(word, offsets))
            self.log.info(f"'{word}' typed as '{typed}', mistakes at {offsets}")

    def _highlight(self, word: str, offsets: List[int]) -> Text:
        """Target word with mistyped positions in red."""
        bad = set(offsets)
        out = Text("  ")
        for i, ch in enumerate(word):
            out.append(ch, style="bold red underline" if i in bad else "green")
        return out

    # DISPLAY -------------------------------------------------------------------------------
    def _show_stats(self):
        table = Table(title="Weak Bigrams", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Bigram", style="bold")
        table.add_column("Score", justify="right", style="magenta")
        table.add_column("Misses", justify="right")
        table.add_column("Seen", justify="right", style="dim")

        rows = stats_rows(self.session.store)
        if not rows:
            self.console.print("[dim](no mistakes yet)[/dim]")
            return
        for i, (bigram, score, misses, occ) in enumerate(rows, 1):
            table.add_row(str(i), repr(bigram), f"{score:.3f}", str(misses), str(occ))
        self.console.print(table)

    def _show_dump(self):
        log_bigram_scores(self.session.store)
        panel = Panel(
            json.dumps(self.session.store.export_stats(), indent=2),
            title="Bigram Scores",
            border_style="yellow"
        )
        self.console.print(panel)

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.console.print(self._session_summary())
        self.running = False

    def _session_summary(self):
        s = self.session.stats()
        clean = len([h for h in self.history if h["mistakes"] == 0])
        t = Table(title="Session Summary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Words attempted", str(len(self.history)))
        t.add_row("Clean words", str(clean))
        t.add_row("Mistakes", str(s["mistakes"]))
        t.add_row("Distinct bigrams", str(s["distinct_bigrams"]))
        t.add_row("Weakest", ", ".join(repr(b) for b in s["top"]) or "(none)")
        return t


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bigram-drill",
                                description="Typing drill that targets your weak bigrams.")
    p.add_argument("--words", help="word list file, one word per line")
    p.add_argument("--seed", type=int, help="random seed for reproducible drills")
    p.add_argument("--config", default="bigram_drill.json", help="JSON config file")
    p.add_argument("--rounds", type=int, default=0, help="stop after N words (0 = until /quit)")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p


def build_session(cfg: Config, words_path: Optional[str] = None, seed: Optional[int] = None) -> PracticeSession:
    """Wire config + CLI overrides into a PracticeSession."""
    path = words_path or cfg.get("word_list")
    words = load_word_list(path) if path else DEFAULT_WORDS
    seed = seed if seed is not None else cfg.get("seed")
    return PracticeSession(ListWordSource(words, seed=seed), cfg.selector_config())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        session = build_session(Config(args.config), args.words, args.seed)
        CLI(session, rounds=args.rounds).run()
    except BigramDrillError as e:
        console.print(f"[red]error:[/red] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
