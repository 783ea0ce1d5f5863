"""Annotate command - Edit a document's metadata and write it back.

The document is parsed with retention, the requested fields are replaced,
and the regenerated <metadata> block is spliced into the original document.
Everything outside the metadata block is preserved.
"""

from pathlib import Path
from typing import Dict, List, Optional

import typer

from svgmetadata.cli.base import MetadataCommand
from svgmetadata.core.exceptions import SVGMetadataError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.models import MetadataRecord

logger = get_logger(__name__)


def apply_edits(
    record: MetadataRecord,
    fields: Dict[str, Optional[str]],
    add_keywords: Optional[List[str]] = None,
    remove_keywords: Optional[List[str]] = None,
) -> List[str]:
    """Apply field edits and keyword changes to a record.

    Args:
        record: Record to modify
        fields: Field name to new value; None leaves the field alone
        add_keywords: Keywords to add
        remove_keywords: Keywords to remove

    Returns:
        Names of the fields that were set
    """
    changed = []
    for name, value in fields.items():
        if value is None:
            continue
        setattr(record, name, value)
        changed.append(name)

    if add_keywords:
        record.add_keyword(*add_keywords)
        changed.append("keywords")
    for keyword in remove_keywords or []:
        if not record.remove_keyword(keyword):
            logger.warning("Keyword not present", keyword=keyword)
        elif "keywords" not in changed:
            changed.append("keywords")

    return changed


class AnnotateCommand(MetadataCommand):
    """Rewrite a document with edited metadata."""

    def execute(
        self,
        source: str,
        fields: Dict[str, Optional[str]],
        add_keywords: Optional[List[str]] = None,
        remove_keywords: Optional[List[str]] = None,
        output: Optional[Path] = None,
    ) -> int:
        try:
            record = self.load_record(source, retain_xml=True)
        except SVGMetadataError as e:
            return self.handle_error(e, f"While reading {source}")

        changed = apply_edits(record, fields, add_keywords, remove_keywords)
        logger.info("Annotating document", source=source, changed=",".join(changed))
        document = record.to_svg()

        if output is None:
            typer.echo(document, nl=False)
            return 0

        try:
            output.write_text(document, encoding="utf-8")
        except OSError as e:
            return self.handle_error(e, f"While writing {output}")
        self.print_success(f"Wrote {output}")
        return 0


def command(
    source: str = typer.Argument(..., help="SVG file, URL, or - for stdin"),
    title: Optional[str] = typer.Option(None, "--title", help="dc:title"),
    creator: Optional[str] = typer.Option(None, "--creator", help="Creator name"),
    owner: Optional[str] = typer.Option(None, "--owner", help="Rights holder"),
    publisher: Optional[str] = typer.Option(None, "--publisher", help="Publisher"),
    license: Optional[str] = typer.Option(
        None, "--license", help="License URI or 'Public Domain'"
    ),
    description: Optional[str] = typer.Option(
        None, "--description", help="dc:description"
    ),
    language: Optional[str] = typer.Option(None, "--language", help="dc:language"),
    date: Optional[str] = typer.Option(None, "--date", help="dc:date"),
    keyword: Optional[List[str]] = typer.Option(
        None, "--keyword", "-k", help="Keyword to add (repeatable)"
    ),
    remove_keyword: Optional[List[str]] = typer.Option(
        None, "--remove-keyword", help="Keyword to remove (repeatable)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write here instead of stdout"
    ),
) -> None:
    """Set metadata fields and regenerate the document.

    Examples:
        svgmetadata annotate apple.svg --title Apple -k Fruit -o apple.svg
        svgmetadata annotate apple.svg --license "Public Domain"
    """
    fields = {
        "title": title,
        "creator": creator,
        "owner": owner,
        "publisher": publisher,
        "license": license,
        "description": description,
        "language": language,
        "date": date,
    }
    cmd = AnnotateCommand()
    exit_code = cmd.execute(source, fields, keyword, remove_keyword, output)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
