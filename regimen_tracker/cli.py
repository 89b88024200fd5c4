"""Command-line interface for the Regimen Tracker."""

import logging
import click
from datetime import datetime
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .config import config
from .catalog import CYCLE_WEEKS, AdvancedSupplementType, DayType
from .db import RegimenRepository, get_db
from .errors import RegimenError
from .regimen.day_log import DayLog
from .regimen.history import weekly_summary, weight_trend, weight_series
from .regimen.scoring import ScoreBand, daily_score, score_components, score_percent
from .regimen.tracker import RegimenTracker
from .reminders import ReminderPlanner

console = Console()

DAY_TYPE_CHOICE = click.Choice([day_type.value for day_type in DayType], case_sensitive=False)
DATE_OPTION = click.option(
    "--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Date (YYYY-MM-DD), defaults to today",
)


def get_tracker() -> RegimenTracker:
    """Build the tracker on top of the global database."""
    return RegimenTracker(RegimenRepository(get_db()))


def resolve_day(day):
    """Return (calendar date, now) for an optional --date value."""
    now = datetime.now()
    return (day.date() if day else now.date()), now


def resolve_item_id(day_log: DayLog, item_id: str) -> str:
    """Match a full item id or a unique prefix of one."""
    matches = [item.id for item in day_log.items() if item.id.startswith(item_id)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise click.BadParameter(f"No item matches '{item_id}'", param_hint="ITEM_ID")
    raise click.BadParameter(f"'{item_id}' matches {len(matches)} items, use a longer prefix", param_hint="ITEM_ID")


def completion_mark(item) -> str:
    if item.is_completed:
        return f"[green]✅ {item.completed_at:%H:%M}[/green]"
    return "[black]⬜[/black]"


def render_day(day_log: DayLog, cycle, now: datetime):
    """Print the full view of one day log."""
    score = score_percent(daily_score(day_log))
    band = ScoreBand.from_percent(score)
    week = f"Week {cycle.current_week(now)}/{CYCLE_WEEKS}" if cycle else "—"

    console.print(Panel.fit(
        f"[bold]{day_log.date:%A %d %B %Y}[/bold]  •  {day_log.day_type.display_name}  •  {week}\n"
        f"Daily score: [bold {band.color}]{score}%[/bold {band.color}] ({band.value})",
        title="📅 Today",
        style="bold blue",
    ))

    meals = Table(title="🍽️  Meals", box=box.ROUNDED)
    meals.add_column("ID", style="black")
    meals.add_column("Time", style="yellow")
    meals.add_column("Meal")
    meals.add_column("Content")
    meals.add_column("Done", justify="center")
    for meal in day_log.meals:
        meals.add_row(meal.id[:8], meal.scheduled_time or "—", meal.label, meal.meal_type.content, completion_mark(meal))
    console.print(meals)

    supplements = Table(title="💊 Supplements", box=box.ROUNDED)
    supplements.add_column("ID", style="black")
    supplements.add_column("Slot", style="yellow")
    supplements.add_column("Supplement")
    supplements.add_column("Dosage", style="magenta")
    supplements.add_column("Note", style="black")
    supplements.add_column("Done", justify="center")
    for supplement in day_log.supplements:
        supplements.add_row(
            supplement.id[:8],
            supplement.timing_slot.display_name,
            supplement.supplement_type.display_name,
            supplement.dosage,
            supplement.supplement_type.note or "",
            completion_mark(supplement),
        )
    console.print(supplements)

    if not config.HIDE_ADVANCED_SUPPLEMENTS:
        advanced = Table(title="⚡ Advanced Supplements", box=box.ROUNDED)
        advanced.add_column("ID", style="black")
        advanced.add_column("Timing", style="yellow")
        advanced.add_column("Compound")
        advanced.add_column("Dosage", style="magenta")
        advanced.add_column("Done", justify="center")
        for supplement in day_log.advanced_supplements:
            advanced.add_row(
                supplement.id[:8],
                supplement.supplement_type.timing,
                supplement.label,
                supplement.dosage,
                completion_mark(supplement),
            )
        console.print(advanced)

    sleep_color = day_log.sleep_status.color
    weight = f"{day_log.weight:.1f} kg" if day_log.weight is not None else "—"
    components = score_components(day_log)
    console.print(Panel(
        f"[bold]Water:[/bold] {day_log.water_intake:.2f} / 3L ({components['water'] * 100:.0f}%)\n"
        f"[bold]Sleep:[/bold] [{sleep_color}]{day_log.sleep_hours:.1f}h ({day_log.sleep_status.value})[/{sleep_color}]"
        f"  •  goal 7-9h\n"
        f"[bold]Weight:[/bold] {weight}\n"
        f"[bold]Targets:[/bold] {config.CALORIES_GOAL} kcal • P {config.PROTEIN_GOAL}g • "
        f"C {config.CARBS_GOAL}g • F {config.FATS_GOAL}g",
        title="📊 Trackers",
        box=box.ROUNDED,
    ))


@click.group()
def cli():
    """Daily meal, supplement and cycle regimen tracker."""
    logging.basicConfig(level=config.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@cli.command()
@DATE_OPTION
@click.option("--day-type", type=DAY_TYPE_CHOICE, help="Day type for a newly created day")
def today(day, day_type):
    """Show the regimen for a day, creating it on first access."""
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        day_log = tracker.day_log(day, now, DayType(day_type.upper()) if day_type else None)
        render_day(day_log, tracker.active_cycle(), now)
    except Exception as e:
        console.print(f"[red]❌ Error loading day: {e}[/red]")


@cli.command()
@click.argument("item_id")
@DATE_OPTION
def toggle(item_id, day):
    """Check or uncheck an item by id (or unique id prefix)."""
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        day_log = tracker.day_log(day, now)
        item = tracker.toggle_item(day, resolve_item_id(day_log, item_id), now)
        state = "[green]done[/green]" if item.is_completed else "[yellow]not done[/yellow]"
        console.print(f"✅ {item.label} marked {state}")
        console.print(f"Daily score: {score_percent(daily_score(tracker.day_log(day, now)))}%")
    except click.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]❌ Error toggling item: {e}[/red]")


@cli.command()
@click.argument("amount", type=float)
@DATE_OPTION
def water(amount, day):
    """Add (or with a negative amount, remove) liters of water."""
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        tracker.day_log(day, now)
        day_log = tracker.add_water(day, amount)
        console.print(f"💧 Water: {day_log.water_intake:.2f} / 3L")
    except Exception as e:
        console.print(f"[red]❌ Error updating water: {e}[/red]")


@cli.command()
@click.argument("hours", type=click.FloatRange(min=0))
@DATE_OPTION
def sleep(hours, day):
    """Set hours slept."""
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        tracker.day_log(day, now)
        day_log = tracker.set_sleep_hours(day, hours)
        color = day_log.sleep_status.color
        console.print(f"😴 Sleep: [{color}]{day_log.sleep_hours:.1f}h ({day_log.sleep_status.value})[/{color}]")
    except Exception as e:
        console.print(f"[red]❌ Error updating sleep: {e}[/red]")


@cli.command()
@click.argument("kg", type=float, required=False)
@click.option("--clear", is_flag=True, help="Remove the recorded weight")
@DATE_OPTION
def weight(kg, clear, day):
    """Record body weight in kg."""
    if kg is None and not clear:
        raise click.UsageError("Give a weight in kg or --clear")
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        tracker.day_log(day, now)
        tracker.set_weight(day, None if clear else kg)
        console.print("⚖️  Weight cleared" if clear else f"⚖️  Weight: {kg:.1f} kg")
    except Exception as e:
        console.print(f"[red]❌ Error updating weight: {e}[/red]")


@cli.command("day-type")
@click.argument("day_type", type=DAY_TYPE_CHOICE)
@DATE_OPTION
def day_type_command(day_type, day):
    """Change a day's type and reschedule its meals."""
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        tracker.day_log(day, now)
        day_log = tracker.change_day_type(day, DayType(day_type.upper()))
        console.print(f"[green]✅ Day type set to {day_log.day_type.display_name}[/green]")
        if day_log.day_type != DayType.REST and day_log.total_meals_count < 8:
            console.print("[yellow]⚠️  Training meals are not added to a day created as a rest day.[/yellow]")
    except Exception as e:
        console.print(f"[red]❌ Error changing day type: {e}[/red]")


@cli.command("reset-day")
@DATE_OPTION
def reset_day(day):
    """Clear all check-offs and metrics of a day."""
    day, _ = resolve_day(day)
    if not click.confirm(f"Reset all meals, supplements and trackers of {day.isoformat()}?"):
        console.print("[black]Operation cancelled.[/black]")
        return
    try:
        get_tracker().reset_day(day)
        console.print("[green]✅ Day reset[/green]")
    except RegimenError as e:
        console.print(f"[yellow]⚠️  {e}[/yellow]")
    except Exception as e:
        console.print(f"[red]❌ Error resetting day: {e}[/red]")


@cli.command("delete-day")
@DATE_OPTION
def delete_day(day):
    """Permanently delete a day log."""
    day, _ = resolve_day(day)
    if not click.confirm(f"Delete the log of {day.isoformat()}? This cannot be undone."):
        console.print("[black]Operation cancelled.[/black]")
        return
    try:
        if get_tracker().delete_day(day):
            console.print("[green]✅ Day deleted[/green]")
        else:
            console.print(f"[yellow]⚠️  No log for {day.isoformat()}[/yellow]")
    except Exception as e:
        console.print(f"[red]❌ Error deleting day: {e}[/red]")


@cli.command()
def cycle():
    """Show cycle progress, dosages by week and blood work dates."""
    console.print(Panel.fit("🔄 Supplement Cycle", style="bold blue"))
    try:
        tracker = get_tracker()
        now = datetime.now()
        current = tracker.active_cycle()
        if current is None:
            console.print("[yellow]No active cycle. Start one with 'regimen new-cycle'.[/yellow]")
            return

        week = current.current_week(now)
        console.print(Panel(
            f"[bold]Day:[/bold] {current.current_day(now)} / 56 ({current.progress(now) * 100:.0f}%)\n"
            f"[bold]Week:[/bold] {week} / {CYCLE_WEEKS}\n"
            f"[bold]Start:[/bold] {current.start_date:%d %b %Y}  •  [bold]End:[/bold] {current.end_date:%d %b %Y}\n"
            f"[bold]Days remaining:[/bold] {current.days_remaining(now)}"
            + ("\n[green]Cycle completed[/green]" if current.is_completed(now) else ""),
            title="📈 Progress",
            box=box.ROUNDED,
        ))

        if not config.HIDE_ADVANCED_SUPPLEMENTS:
            table = Table(title="Dosages by Week", box=box.ROUNDED)
            table.add_column("Compound", style="black")
            for w in range(1, CYCLE_WEEKS + 1):
                table.add_column(f"W{w}", justify="center", style="bold green" if w == week else None)
            for kind in AdvancedSupplementType:
                table.add_row(kind.display_name, *[kind.dosage(w) or "—" for w in range(1, CYCLE_WEEKS + 1)])
            console.print(table)

        blood = Table(title="🩸 Blood Work", box=box.ROUNDED)
        blood.add_column("Week", style="yellow")
        blood.add_column("Date")
        blood.add_column("Checkpoint")
        for milestone in current.blood_work_dates():
            style = "black" if milestone.date < now else None
            blood.add_row(f"W{milestone.week}", f"{milestone.date:%d %b %Y}", milestone.label, style=style)
        console.print(blood)
    except Exception as e:
        console.print(f"[red]❌ Error loading cycle: {e}[/red]")


@cli.command("new-cycle")
def new_cycle():
    """End the current cycle and start a new one today."""
    if not click.confirm("This ends the current cycle and starts a new one from today. Continue?"):
        console.print("[black]Operation cancelled.[/black]")
        return
    try:
        started = get_tracker().start_new_cycle(datetime.now())
        console.print(f"[green]✅ New cycle started on {started.start_date:%Y-%m-%d}[/green]")
    except Exception as e:
        console.print(f"[red]❌ Error starting cycle: {e}[/red]")


@cli.command("cycle-start")
@click.argument("start", type=click.DateTime(formats=["%Y-%m-%d"]))
def cycle_start(start):
    """Move the start date of the active cycle."""
    try:
        updated = get_tracker().set_cycle_start(start)
        console.print(f"[green]✅ Cycle start set to {updated.start_date:%Y-%m-%d}[/green]")
    except RegimenError as e:
        console.print(f"[yellow]⚠️  {e}[/yellow]")
    except Exception as e:
        console.print(f"[red]❌ Error updating cycle: {e}[/red]")


@cli.command()
@click.option("--days", default=7, help="Number of recent days to show")
def history(days):
    """Show recent daily scores and the weight trend."""
    console.print(Panel.fit(f"📜 History (last {days} days)", style="bold blue"))
    try:
        logs = get_tracker().history()
        if not logs:
            console.print("[yellow]No history yet. Start tracking with 'regimen today'.[/yellow]")
            return

        summary = weekly_summary(logs, days)
        console.print(
            f"Average: [bold {summary.band.color}]{summary.average_percent}%[/bold {summary.band.color}] "
            f"({summary.band.value}) over {summary.days_tracked} day(s)"
        )

        table = Table(box=box.ROUNDED)
        table.add_column("Date", style="black")
        table.add_column("Type", style="yellow")
        table.add_column("Meals")
        table.add_column("Supplements")
        table.add_column("Water")
        table.add_column("Sleep")
        table.add_column("Weight")
        table.add_column("Score", justify="right")
        for log in logs[:days]:
            score = score_percent(daily_score(log))
            band = ScoreBand.from_percent(score)
            table.add_row(
                f"{log.date:%a %Y-%m-%d}",
                log.day_type.value,
                f"{log.completed_meals_count}/{log.total_meals_count}",
                f"{log.completed_supplements_count}/{log.total_supplements_count}",
                f"{log.water_intake:.1f}L",
                f"{log.sleep_hours:.1f}h",
                f"{log.weight:.1f}" if log.weight is not None else "—",
                f"[{band.color}]{score}%[/{band.color}]",
            )
        console.print(table)

        series = weight_series(logs)
        trend = weight_trend(logs)
        if series:
            latest = series[-1][1]
            low = min(weight for _, weight in series)
            high = max(weight for _, weight in series)
            line = f"⚖️  Latest {latest:.1f} kg • min {low:.1f} • max {high:.1f} ({len(series)} weigh-ins)"
            if trend:
                line += f" • trend {trend.change:+.1f} kg"
            console.print(line)
        else:
            console.print("[black]No weight recorded yet.[/black]")
    except Exception as e:
        console.print(f"[red]❌ Error loading history: {e}[/red]")


@cli.command()
@DATE_OPTION
def reminders(day):
    """List the reminders planned for a day."""
    console.print(Panel.fit("🔔 Planned Reminders", style="bold blue"))
    if not config.NOTIFICATIONS_ENABLED:
        console.print("[yellow]Notifications are disabled (set NOTIFICATIONS_ENABLED=true).[/yellow]")
        return
    try:
        tracker = get_tracker()
        day, now = resolve_day(day)
        day_log = tracker.day_log(day, now)
        planned = ReminderPlanner(config).plan(day_log, tracker.active_cycle(), now)

        table = Table(box=box.ROUNDED)
        table.add_column("When", style="yellow")
        table.add_column("Repeats")
        table.add_column("Title")
        table.add_column("Message")
        for reminder in planned:
            when = f"{reminder.at:%H:%M}" if reminder.repeats else f"{reminder.at:%Y-%m-%d %H:%M}"
            table.add_row(when, "daily" if reminder.repeats else "once", reminder.title, reminder.body)
        console.print(table)
    except Exception as e:
        console.print(f"[red]❌ Error planning reminders: {e}[/red]")


@cli.command()
def status():
    """Show database statistics."""
    console.print(Panel.fit("ℹ️  System Status", style="bold blue"))
    try:
        tracker = get_tracker()
        logs = tracker.history()
        current = tracker.active_cycle()
        console.print(f"\n[black]📊 Database Statistics:[/black]")
        console.print(f"  • Days tracked: {len(logs)}")
        if logs:
            summary = weekly_summary(logs, len(logs))
            console.print(f"  • Average score: {summary.average_percent}%")
            console.print(f"  • Tracking since: {logs[-1].date:%Y-%m-%d}")
        if current:
            console.print(f"  • Cycle: week {current.current_week(datetime.now())}/{CYCLE_WEEKS}")
        else:
            console.print("  • Cycle: none active")
    except Exception as e:
        console.print(f"[red]❌ Database error: {e}[/red]")


@cli.command()
def wipe():
    """Delete all history and cycles."""
    console.print(Panel.fit("⚠️  Delete All Data", style="bold yellow"))

    if not click.confirm("This will delete all history and cycles. Are you sure?"):
        console.print("[black]Operation cancelled.[/black]")
        return

    try:
        get_tracker().delete_all()
        console.print("[green]✅ All data deleted![/green]")
    except Exception as e:
        console.print(f"[red]❌ Error deleting data: {e}[/red]")


if __name__ == "__main__":
    cli()
