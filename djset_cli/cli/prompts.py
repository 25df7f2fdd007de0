"""
Validated input helpers built on Rich prompts. Each helper keeps asking until
the answer is acceptable.
"""

from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt

from djset_cli.models.energy import EnergyLevel


def ask_non_empty(console: Console, prompt: str, default: str | None = None) -> str:
    """Asks for a full line of text that is not empty."""
    while True:
        if default:
            value = Prompt.ask(prompt, console=console, default=default)
        else:
            value = Prompt.ask(prompt, console=console)
        if value:
            return value
        console.print("[yellow]Input cannot be empty. Please try again.[/yellow]")


def ask_int_in_range(
    console: Console,
    prompt: str,
    min_value: int,
    max_value: int,
    default: int | None = None,
) -> int:
    """Asks for a whole number between `min_value` and `max_value` inclusive."""
    while True:
        if default is not None:
            value = IntPrompt.ask(prompt, console=console, default=default)
        else:
            value = IntPrompt.ask(prompt, console=console)
        if min_value <= value <= max_value:
            return value
        console.print(
            f"[yellow]Invalid number. Enter {min_value} to {max_value}.[/yellow]"
        )


def ask_float_in_range(
    console: Console, prompt: str, min_value: float, max_value: float
) -> float:
    """Asks for a decimal number between `min_value` and `max_value` inclusive."""
    while True:
        value = FloatPrompt.ask(prompt, console=console)
        if min_value <= value <= max_value:
            return value
        console.print(
            f"[yellow]Invalid number. Enter {min_value} to {max_value}.[/yellow]"
        )


def ask_energy(console: Console) -> EnergyLevel:
    """Shows the energy scale and asks for a level by number."""
    console.print("Energy Level:")
    for level in EnergyLevel:
        console.print(f"  {level.value}) {level.label}")
    choice = ask_int_in_range(
        console,
        "Choose energy (1-3)",
        min(EnergyLevel).value,
        max(EnergyLevel).value,
    )
    return EnergyLevel(choice)


def ask_index(console: Console, prompt: str, size: int) -> int:
    """Asks for an index into a collection of `size` items; -1 if it is empty."""
    if size <= 0:
        return -1
    return ask_int_in_range(console, prompt, 0, size - 1)
