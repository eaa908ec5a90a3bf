"""Host Stats - Terminal report output"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import ReportSnapshot


def print_report(snapshot: ReportSnapshot, console: Console):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              HOST STATS REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Uptime: [cyan]{snapshot.uptime_text}[/]\n"
        f"External IP: [cyan]{snapshot.external_ip or 'unknown'}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if snapshot.interfaces:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("NETWORK INTERFACES", style="bold")
        for iface in snapshot.interfaces:
            console.print(f"  {iface}", markup=False)

    console.print("\n" + "─" * 70, style="cyan")
    console.print("FAILED LOGINS", style="bold red")
    if snapshot.failures:
        table = Table(box=box.ROUNDED)
        table.add_column("IP Address", style="red")
        table.add_column("Failures", style="yellow", justify="right")
        for failure in snapshot.failures:
            table.add_row(escape(failure.source_address), str(failure.attempt_count))
        console.print(table)
    else:
        console.print("  none", style="green")

    console.print("\n" + "─" * 70, style="cyan")
    console.print("DISK USAGE", style="bold")
    table = Table(box=box.ROUNDED)
    for column in ("Filesystem", "Size", "Used", "Available", "Use%", "Mounted on"):
        table.add_column(column)
    for disk in snapshot.disks:
        color = 'red' if _percent(disk.use_percentage) >= 90 else 'white'
        table.add_row(escape(disk.filesystem), escape(disk.size), escape(disk.used),
                      escape(disk.available), f"[{color}]{escape(disk.use_percentage)}[/]",
                      escape(disk.mount_point))
    console.print(table)

    if snapshot.diagnostics:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("WARNINGS", style="bold yellow")
        for diag in snapshot.diagnostics:
            console.print(f"  {diag.source}: [yellow]{escape(diag.message)}[/]")

    console.print("\n" + "═" * 70, style="cyan")


def _percent(value: str) -> int:
    digits = value.rstrip('%')
    return int(digits) if digits.isdigit() else 0
