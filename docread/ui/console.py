from rich.console import Console
from rich.text import Text

from docread.core.models import MatchTriple, SearchResult, SearchSummary

SEPARATOR = "==="


def format_triple(triple: MatchTriple) -> Text:
    return Text.assemble(triple.preamble, (triple.matched, "red"), triple.postamble)


class ConsoleReporter:
    """
    Reporting sink that renders one source's block at a time.

    Instances are called by the coordinator while it holds the output lock.
    """

    def __init__(self, *, quiet: bool = False,
                 console: Console | None = None,
                 error_console: Console | None = None) -> None:
        self.quiet = quiet
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def __call__(self, result: SearchResult) -> None:
        self.console.print(Text.assemble("Searched file--> ", (result.identifier, "bright_red")))
        self.console.print()

        if not result.ok:
            self.error_console.print(Text(f"{type(result.error).__name__}: {result.error}", style="red"))
            self.error_console.print()
            return

        # runs matched only by empty occurrences have nothing to show
        shown = result.runs if self.quiet else [m for m in result.matches if m.triples]

        if not shown:
            self.console.print(Text("No matches found", style="bright_red on black"))
            self.console.print()
        elif self.quiet:
            self.console.print(Text(f"Matched {len(result.runs)} runs", style="bright_green on black"))
            self.console.print()
        else:
            for run_index, run_match in enumerate(result.matches, start=1):
                for match_index, triple in enumerate(run_match.triples, start=1):
                    prompt = Text(f"{run_index}-{match_index}", style="bright_yellow on blue")
                    self.console.print(Text.assemble("  ", prompt, "-> ", format_triple(triple)))
                    self.console.print()

        self.console.print(SEPARATOR)
        self.console.print()

    def print_summary(self, *, summary: SearchSummary, archive_count: int,
                      pattern: str, docx_glob: str) -> None:
        self.console.print(f"Searched {summary.searched} files")
        self.console.print()
        self.console.print(f"Searched {archive_count} archives")
        self.console.print()
        self.console.print(Text(f'  Search parameters: regex: {pattern}, glob="{docx_glob}"'))
        self.console.print()
        self.console.print()
