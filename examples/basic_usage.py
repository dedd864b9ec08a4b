"""
Basic usage example: a three screen menu driven by Construct.
"""

from rich.prompt import Prompt

from term_construct import Construct, setup_logging, write_line_break


class Home:
    """Landing screen offering the other screens."""

    def title(self) -> str:
        return "Home"

    def content(self, terminal, construct) -> None:
        terminal.write_line("1) About")
        terminal.write_line("2) Settings")
        terminal.write_line("q) Quit")
        write_line_break(terminal)

        choice = Prompt.ask("Select", choices=["1", "2", "q"], default="q")
        if choice == "1":
            construct.display(About())
        elif choice == "2":
            construct.display(Settings())


class About:
    """Static text screen."""

    def title(self) -> str:
        return "About"

    def content(self, terminal, construct) -> None:
        terminal.write_line("A minimal view router for terminal applications.")
        write_line_break(terminal)
        Prompt.ask("Press enter to go back", default="")
        construct.display(Home())


class Settings:
    """Shows the router configuration."""

    def title(self) -> str:
        return "Settings"

    def content(self, terminal, construct) -> None:
        terminal.write_line(f"Logo: {construct.logo!r}")
        terminal.write_line(f"Clearing: {construct.clearing_strategy!r}")
        write_line_break(terminal)
        Prompt.ask("Press enter to go back", default="")
        construct.display(Home())


def main():
    """
    Run the menu until the user quits.
    """
    setup_logging(verbose=False)
    construct = Construct.builder().with_logo("== term-construct ==").build()
    construct.display(Home())


if __name__ == "__main__":
    main()
