"""Console script for coflowcode."""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ConfigLoader, Settings
from .errors import ImportValidationError, StoreCorruptedError
from .grading import grade_fill_in_blank, grade_multiple_choice
from .items import FillInBlankItem, MultipleChoiceItem
from .prompts import PromptLoader, build_item_context, process_item_grading_prompt
from .storage import AssignmentStore, save_assignment
from .utils.logging import setup_logging
from .validation import load_assignment_file, load_submission_file

app = typer.Typer(help="Author, validate and auto-grade assignments.")
console = Console()


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _load_assignment(path: Path):
    try:
        return load_assignment_file(path)
    except (ImportValidationError, FileNotFoundError) as e:
        _fail(str(e))


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """Assignment authoring and grading tools."""
    load_dotenv()
    try:
        settings = ConfigLoader().load_settings(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    if log_level:
        settings.log_level = log_level.upper()
    setup_logging(settings.log_level, settings.log_file)
    ctx.obj = settings


@app.command("validate-assignment")
def validate_assignment_command(path: Path):
    """Check that a file is a valid assignment document."""
    assignment = _load_assignment(path)
    console.print(
        f"[green]Valid assignment[/green] {assignment.title!r}: "
        f"{len(assignment.items)} items on {len(assignment.pages)} page(s)"
    )


@app.command("validate-submission")
def validate_submission_command(path: Path):
    """Check that a file is a valid submission bundle."""
    try:
        bundle = load_submission_file(path)
    except (ImportValidationError, FileNotFoundError) as e:
        _fail(str(e))
    console.print(
        f"[green]Valid submission[/green] for {bundle.assignment_title!r}: "
        f"{len(bundle.answers)} answers, {len(bundle.pending_grading_items)} pending grading"
    )


@app.command()
def grade(
    path: Path,
    item_id: int,
    answers: List[str] = typer.Argument(None, help="Choice indices or the answer text"),
):
    """Auto-grade one answer to a multiple-choice or fill-in-blank item."""
    assignment = _load_assignment(path)
    item = assignment.get_item(item_id)
    if item is None:
        _fail(f"No item with id {item_id}")

    answers = answers or []
    if isinstance(item, MultipleChoiceItem):
        try:
            selected = [int(a) for a in answers]
        except ValueError:
            _fail("Multiple-choice answers must be choice indices")
        passed = grade_multiple_choice(item, selected).passed
    elif isinstance(item, FillInBlankItem):
        passed = grade_fill_in_blank(item, " ".join(answers)).passed
    else:
        _fail(f"Item {item_id} ({item.type.value}) is not auto-graded")

    if passed:
        console.print("[green]PASSED[/green]")
    else:
        console.print("[red]NOT PASSED[/red]")


@app.command("render-prompt")
def render_prompt(
    ctx: typer.Context,
    path: Path,
    item_id: int,
    answer: str,
    test_results: Optional[str] = typer.Option(None, "--test-results", help="Unit test output"),
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Template file in the prompts directory to use instead"
    ),
):
    """Fill in an item's AI grading prompt with a student answer."""
    assignment = _load_assignment(path)
    item = assignment.get_item(item_id)
    if item is None:
        _fail(f"No item with id {item_id}")

    if template:
        loader = PromptLoader(_settings(ctx).prompts_dir)
        try:
            prompt_template = loader.load(template)
        except FileNotFoundError as e:
            _fail(f"{e} (available: {', '.join(loader.available()) or 'none'})")
        context = build_item_context(item, answer, test_results)
        validation = prompt_template.validate(context)
        if not validation.is_valid:
            missing = ", ".join(dict.fromkeys(validation.missing_placeholders))
            console.print(f"[yellow]Unfilled placeholders:[/yellow] {escape(missing)}")
        prompt = prompt_template.render(context)
    else:
        prompt = process_item_grading_prompt(item, answer, test_results)
    if prompt is None:
        _fail(f"Item {item_id} has no AI grading prompt")
    console.print(prompt, markup=False, highlight=False)


@app.command()
def export(
    path: Path,
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Destination directory"),
):
    """Re-export a valid assignment under its canonical filename."""
    assignment = _load_assignment(path)
    written = save_assignment(assignment, output_dir)
    console.print(f"Wrote {written}")


@app.command("import")
def import_command(
    ctx: typer.Context,
    path: Path,
    new_id: bool = typer.Option(False, "--new-id", help="Store under the next free id"),
):
    """Import an assignment file into the local store."""
    store = AssignmentStore(_settings(ctx).store_path)
    try:
        assignment = store.import_file(path, assign_new_id=new_id)
    except (ImportValidationError, StoreCorruptedError, FileNotFoundError) as e:
        _fail(str(e))
    console.print(f"Imported assignment {assignment.id}: {assignment.title}")


@app.command("list")
def list_command(ctx: typer.Context):
    """Show the assignments in the local store."""
    store = AssignmentStore(_settings(ctx).store_path)
    table = Table(title="Assignments")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Items", justify="right")
    table.add_column("Minutes", justify="right")

    for assignment in store.load():
        table.add_row(
            str(assignment.id),
            assignment.title,
            str(len(assignment.items)),
            str(assignment.estimated_time) if assignment.estimated_time is not None else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
