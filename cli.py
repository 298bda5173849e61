import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import date, datetime

from flashbook.config import settings
from flashbook.database import SessionLocal, init_db, reset_db
from flashbook.crud import (
    create_grammar, create_vocab, create_sentence,
    SCHEMAS_BY_KIND, delete_item, editable_fields, get_item, get_items, get_review_log, persist_srs, update_item
)
from flashbook.errors import FlashbookError, InvalidRatingError, ItemNotFoundError
from flashbook.logging_config import configure_logging
from flashbook.schemas import GrammarCreate, VocabularyCreate, SentenceCreate, VerbConjugation, ITEM_KINDS
from flashbook.session import DeckMode, ReviewSession, browse_items, build_deck, collect_lessons
from flashbook.srs import SRSAlgorithm

app = typer.Typer(help="Flashbook CLI - grammar, vocabulary and sentences with spaced repetition")
console = Console()

# Scheduling state is only changed by reviews
SRS_FIELDS = {"srs", "next_review_at", "interval", "ease_factor"}

@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Log level (default from FLASHBOOK_LOG_LEVEL)")
):
    configure_logging(log_level)

def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}")

def _fail(message: str):
    console.print(f"[red]✗[/red] {escape(message)}")
    raise typer.Exit(code=1)

@app.command()
def init():
    """Initialize database tables"""
    init_db()
    console.print("[green]✓[/green] Database initialized successfully!")

@app.command("reset-db")
def reset_database():
    """Delete all items and reinitialize database (WARNING: irreversible!)"""
    confirm = typer.confirm("⚠️  This will DELETE ALL DATA. Are you sure?")
    if not confirm:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    console.print("[yellow]Dropping and recreating all tables...[/yellow]")
    reset_db()
    console.print("[green]✓[/green] Database reset complete! All data deleted.")

@app.command()
def add_grammar(
    title: str = typer.Option(..., prompt="Grammar point"),
    explanation: str = typer.Option("", prompt="Explanation"),
    example: str = typer.Option("", help="Example sentence"),
    translation: str = typer.Option("", help="Translation of the example"),
    lesson: str = typer.Option("", help="Lesson tag")
):
    """Add a grammar point"""
    db = SessionLocal()
    try:
        item = create_grammar(db, GrammarCreate(
            title=title,
            explanation=explanation,
            example_sentence=example,
            example_translation=translation,
            lesson=lesson
        ))
        console.print(f"[green]✓[/green] Grammar point added! ID: {item.id}")
        console.print(f"  First review: {item.next_review_at}")
    except ValidationError as e:
        _fail(f"Invalid input: {e}")
    finally:
        db.close()

@app.command()
def add_vocab(
    word: str = typer.Option(..., prompt="Word"),
    reading: str = typer.Option("", prompt="Reading"),
    meaning: str = typer.Option("", prompt="Meaning"),
    example: str = typer.Option("", help="Example sentence"),
    lesson: str = typer.Option("", help="Lesson tag"),
    present: Optional[str] = typer.Option(None, help="Present form"),
    negative: Optional[str] = typer.Option(None, help="Negative form"),
    past: Optional[str] = typer.Option(None, help="Past form"),
    past_negative: Optional[str] = typer.Option(None, help="Past negative form"),
    te_form: Optional[str] = typer.Option(None, help="Te-form"),
    tai_form: Optional[str] = typer.Option(None, help="Tai-form")
):
    """Add a vocabulary entry (verb conjugations optional)"""
    conjugation = VerbConjugation(
        present=present,
        negative=negative,
        past=past,
        past_negative=past_negative,
        te_form=te_form,
        tai_form=tai_form
    )
    db = SessionLocal()
    try:
        item = create_vocab(db, VocabularyCreate(
            word=word,
            reading=reading,
            meaning=meaning,
            example_sentence=example,
            lesson=lesson,
            conjugation=conjugation if conjugation.filled() else None
        ))
        console.print(f"[green]✓[/green] Vocabulary added! ID: {item.id}")
        console.print(f"  First review: {item.next_review_at}")
    except ValidationError as e:
        _fail(f"Invalid input: {e}")
    finally:
        db.close()

@app.command()
def add_sentence(
    text: str = typer.Option(..., prompt="Japanese sentence"),
    translation: str = typer.Option("", prompt="Translation"),
    grammar: Optional[str] = typer.Option(None, help="Linked grammar point"),
    lesson: str = typer.Option("", help="Lesson tag")
):
    """Add an example sentence"""
    db = SessionLocal()
    try:
        item = create_sentence(db, SentenceCreate(
            japanese_text=text,
            translation=translation,
            linked_grammar=grammar,
            lesson=lesson
        ))
        console.print(f"[green]✓[/green] Sentence added! ID: {item.id}")
        console.print(f"  First review: {item.next_review_at}")
    except ValidationError as e:
        _fail(f"Invalid input: {e}")
    finally:
        db.close()

@app.command("delete-item")
def remove_item(kind: str, item_id: int):
    """Delete an item (kind: grammar, vocab or sentence)"""
    if kind not in ITEM_KINDS:
        _fail(f"Invalid kind '{kind}'. Use grammar, vocab or sentence")
    db = SessionLocal()
    try:
        delete_item(db, kind, item_id)
        console.print(f"[green]✓[/green] Deleted {kind} {item_id}")
    except FlashbookError as e:
        _fail(str(e))
    finally:
        db.close()

@app.command("edit-item")
def edit_item(
    kind: str,
    item_id: int,
    fields: List[str] = typer.Option(..., "--set", help="field=value to change (repeatable), e.g. --set meaning=water")
):
    """Edit an item's fields (kind: grammar, vocab or sentence)"""
    if kind not in ITEM_KINDS:
        _fail(f"Invalid kind '{kind}'. Use grammar, vocab or sentence")

    updates = {}
    conjugation_updates = {}
    for pair in fields:
        if "=" not in pair:
            _fail(f"Expected field=value, got '{pair}'")
        key, value = pair.split("=", 1)
        key = key.strip().replace("-", "_")
        if kind == "vocab" and key in VerbConjugation.model_fields:
            conjugation_updates[key] = value.strip() or None
        elif key in editable_fields(kind) - SRS_FIELDS - {"conjugation"}:
            updates[key] = value.strip()
        else:
            _fail(f"Cannot edit {kind} field '{key}'")

    db = SessionLocal()
    try:
        if conjugation_updates:
            current = get_item(db, kind, item_id).conjugation or {}
            updates["conjugation"] = VerbConjugation(**{**current, **conjugation_updates}).model_dump()
        item = update_item(db, kind, item_id, updates)
        console.print(f"[green]✓[/green] Updated {kind} {item_id}: {escape(', '.join(sorted(updates)))}")
        console.print(f"  Front: {escape(SCHEMAS_BY_KIND[kind].model_validate(item).front)}")
    except (FlashbookError, ValueError) as e:
        _fail(str(e))
    finally:
        db.close()

@app.command("list-items")
def list_all(
    kind: Optional[str] = typer.Option(None, help="Only show one kind: grammar, vocab or sentence"),
    lesson: Optional[str] = typer.Option(None, help="Only show this lesson"),
    search: Optional[str] = typer.Option(None, help="Text to search for (case-insensitive)")
):
    """List items with their review schedule"""
    if kind and kind not in ITEM_KINDS:
        _fail(f"Invalid kind '{kind}'. Use grammar, vocab or sentence")
    db = SessionLocal()
    try:
        items = browse_items(*get_items(db), kind=kind, lesson=lesson, search=search)
        if not items:
            console.print("[yellow]No items match. Try changing filters or add items.[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Kind", style="cyan")
        table.add_column("ID", justify="right")
        table.add_column("Front", style="green")
        table.add_column("Lesson", style="yellow")
        table.add_column("Next review", style="blue")
        table.add_column("Interval", justify="right")

        for item in items:
            table.add_row(
                item.kind,
                str(item.id),
                escape(item.front[:50]),
                escape(item.lesson),
                item.srs.next_review_at if item.srs else "-",
                f"{item.srs.interval}d" if item.srs else "-"
            )

        console.print(table)
    finally:
        db.close()

@app.command()
def lessons():
    """List lesson tags used across all items"""
    db = SessionLocal()
    try:
        tags = collect_lessons(*get_items(db))
        if not tags:
            console.print("[yellow]No lessons tagged yet[/yellow]")
            return
        console.print("\n[bold]Lessons:[/bold]")
        for tag in tags:
            console.print(f"  - {tag}")
    finally:
        db.close()

@app.command()
def due(
    lesson: Optional[str] = typer.Option(None, help="Only count this lesson"),
    on: Optional[str] = typer.Option(None, help="Check as of date (YYYY-MM-DD), default: today")
):
    """Show how many cards are due"""
    db = SessionLocal()
    try:
        reference_date = _parse_date(on)
        cards = build_deck(*get_items(db), deck=DeckMode.DUE, lesson=lesson, reference_date=reference_date)
        console.print(f"[bold]{len(cards)}[/bold] card{'s' if len(cards) != 1 else ''} due.")
        for item in cards:
            console.print(f"  \\[{item.kind}] {escape(item.front[:50])} (due {item.srs.next_review_at})")
    finally:
        db.close()

def _show_back(item):
    if item.kind == "grammar":
        console.print(f"[bold]{escape(item.title)}[/bold]")
        console.print(f"  {escape(item.explanation)}")
        if item.example_sentence:
            console.print(f"  [italic]{escape(item.example_sentence)}[/italic] - {escape(item.example_translation)}")
    elif item.kind == "vocab":
        console.print(f"[bold]{escape(item.word)}[/bold]")
        if item.reading:
            console.print(f"  Reading: {escape(item.reading)}")
        console.print(f"  {escape(item.meaning or '-')}")
        if item.conjugation and item.conjugation.filled():
            console.print("  [dim]Verb conjugation[/dim]")
            for label, value in item.conjugation.filled():
                console.print(f"    {label}: {escape(value)}")
    else:
        console.print(f"[bold]{escape(item.japanese_text)}[/bold]")
        console.print(f"  {escape(item.translation)}")

@app.command()
def review(
    deck: DeckMode = typer.Option(DeckMode.DUE, help="Deck: due or all"),
    lesson: Optional[str] = typer.Option(None, help="Only review this lesson"),
    limit: Optional[int] = typer.Option(None, help="Maximum cards this session")
):
    """Run a flashcard review session"""
    db = SessionLocal()
    try:
        cards = build_deck(*get_items(db), deck=deck, lesson=lesson)
        limit = limit if limit is not None else settings.session_limit
        if limit:
            cards = cards[:limit]

        if not cards:
            console.print("[yellow]No cards. Add items or come back when you have items due.[/yellow]")
            return

        session = ReviewSession(cards, persist_srs(db))
        console.print(f"[bold]{session.total}[/bold] card{'s' if session.total != 1 else ''} in deck.\n")

        while not session.finished:
            item = session.current
            console.print(f"[cyan]Card {session.position + 1} of {session.total}[/cyan]  [dim]{item.kind}[/dim]")
            console.print(f"\n  [bold]{escape(item.front)}[/bold]\n")
            typer.prompt("Press Enter to flip", default="", show_default=False)
            _show_back(item)

            new_srs = None
            while True:
                answer = typer.prompt("Rating (again/good/easy)")
                try:
                    new_srs = session.rate(answer)
                    break
                except InvalidRatingError as e:
                    console.print(f"[red]✗[/red] {escape(str(e))}")
                except (ItemNotFoundError, SQLAlchemyError) as e:
                    # Card could not be saved (e.g. deleted elsewhere); drop it from this pass
                    db.rollback()
                    console.print(f"[red]✗[/red] {escape(str(e))} - skipping card\n")
                    session.skip()
                    break

            if new_srs is not None:
                console.print(f"  Next review: {new_srs.next_review_at} (in {new_srs.interval} days)\n")

        console.print("[green]✓[/green] Session complete!")
    finally:
        db.close()

@app.command()
def progress():
    """View learning progress and cards due for review"""
    db = SessionLocal()
    try:
        grammar, vocab, sentences = get_items(db)
        all_items = [*grammar, *vocab, *sentences]
        due_items = build_deck(grammar, vocab, sentences, deck=DeckMode.DUE)
        recent = get_review_log(db, limit=10)

        console.print("\n[bold]Learning Progress[/bold]\n")

        # Statistics
        console.print("[cyan]Statistics:[/cyan]")
        console.print(f"  Grammar points: {len(grammar)}")
        console.print(f"  Vocabulary: {len(vocab)}")
        console.print(f"  Sentences: {len(sentences)}")
        console.print(f"  Cards due for review: {len(due_items)}")

        scheduled = [i for i in all_items if i.srs]
        if scheduled:
            avg_interval = sum(i.srs.interval for i in scheduled) / len(scheduled)
            console.print(f"  Average interval: {avg_interval:.1f} days")

        # Due cards
        if due_items:
            console.print("\n[yellow]Cards Due for Review:[/yellow]")
            table = Table(show_header=True, header_style="bold magenta")
            table.add_column("Kind", style="cyan")
            table.add_column("Front", style="green")
            table.add_column("Due Date", style="yellow")
            table.add_column("Days Overdue", style="red")

            for item in due_items[:20]:
                days_overdue = SRSAlgorithm.days_overdue(item.srs.next_review_at)
                table.add_row(
                    item.kind,
                    escape(item.front[:50]),
                    item.srs.next_review_at,
                    str(days_overdue) if days_overdue > 0 else "Today"
                )

            console.print(table)
            if len(due_items) > 20:
                console.print(f"[dim]... and {len(due_items) - 20} more cards[/dim]")

        # Recent reviews
        if recent:
            console.print("\n[cyan]Recent Reviews:[/cyan]")
            for entry in recent[:5]:
                console.print(f"  {entry.reviewed_on} - \\[{entry.item_kind}] #{entry.item_id} - {entry.rating} -> {entry.next_review_at}")

    finally:
        db.close()

if __name__ == "__main__":
    app()
