from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class DisplayManager:
    """
    Owns every line the user sees and every line they type.

    The session never calls print() or input() directly, so tests can
    swap this class for a scripted fake.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    # ── Input ────────────────────────────────────────────────

    def ask_token(self) -> str:
        """Read the bearer token exactly as typed"""
        return self.console.input("[bold cyan]Blum: [/bold cyan]")

    def ask_menu_choice(self, username: str) -> str:
        menu = Text()
        menu.append(f"Hello, {username}!\n", style="bold white")
        menu.append("1. ", style="bold cyan")
        menu.append("Balance\n")
        menu.append("2. ", style="bold cyan")
        menu.append("Claim points for a game that has started.")

        self.console.print()
        self.console.print(Panel(menu, title="[bold magenta]Blum[/bold magenta]",
                                 border_style="magenta", expand=False))
        return self.console.input("Make your choice (1 - 2): ")

    def ask_games_count(self) -> str:
        return self.console.input("\nEnter the number of games you want to play: ")

    def ask_game_id(self) -> str:
        return self.console.input("Enter your game ID: ")

    def wait_for_enter(self):
        self.console.input("Press ENTER to continue...")

    # ── Output ───────────────────────────────────────────────

    def show_balance(self, available_balance: float, play_passes: int):
        table = Table(show_header=False, border_style="green")
        table.add_column(style="bold white")
        table.add_column(style="yellow", justify="right")
        table.add_row("Your account balance", f"{available_balance:.2f}")
        table.add_row("Number of available games on your account", str(play_passes))

        self.console.print()
        self.console.print(table)

    def show_invalid_count(self):
        self.console.print("Enter a valid number!", style="red")

    def show_game_processing(self, game_number: int):
        self.console.print(f"\n[+] Game number {game_number} is being processed!", style="bold cyan")

    def show_game_started(self, game_number: int, game_id: str, wait_seconds: int):
        self.console.print(f"[+] Game number {game_number} has started successfully!", style="green")
        self.console.print(f"Your game ID: {escape(game_id)}")
        self.console.print(f"[+] Waiting {wait_seconds} seconds for the game to finish...", style="dim")

    def show_game_processed(self, game_number: int, points: int, balance: float):
        self.console.print(f"[+] Game number {game_number} has been successfully processed!\n", style="green")
        self.console.print(f"You received: [yellow]{points}[/yellow]")
        self.console.print(f"Balance: [yellow]{balance:.2f}[/yellow]")

    def show_all_games_processed(self):
        self.console.print("\n[+] All games have been successfully processed!", style="bold green")

    def show_claim_success(self, points: int, game_id: str):
        self.console.print(f"\n[+] Success! You received {points} points!", style="bold green")
        self.console.print(f"Game ID: {escape(game_id)}")

    def show_invalid_choice(self):
        self.console.print("\nInvalid choice!\nTry again!", style="red")

    def show_invalid_token(self, message: str):
        """Fixed two-line hint for a rejected token"""
        self.console.print("\nError:", style="bold red")
        self.console.print("1. Invalid token!")
        self.console.print("2. Try again later!")
        self.console.print(f"\nMessage: {escape(message)}", style="dim")

    def show_error(self, message: str):
        self.console.print(f"\nERROR! {escape(message)}", style="bold red")

    def show_goodbye(self):
        self.console.print("\n\n🎮 Interrupted. Goodbye!")
