"""Letter flows composed from the Drive and Docs client steps.

Each flow runs its API calls as ordered steps and returns on the first
failure. Nothing is rolled back: when create_letter fails after the
document exists, the document stays in Drive, possibly empty and outside
the letters folder, and the failing step is logged.
"""
import logging

from .client import LettersClient
from .core.pipeline import StepResult, run_step
from .models import CreatedLetter, Letter, LetterSummary
from .utils.constants import DOCUMENT_START_INDEX, LETTERS_FOLDER_NAME

logger = logging.getLogger(__name__)


async def create_letter(
    client: LettersClient,
    title: str,
    content: str,
    folder_name: str = LETTERS_FOLDER_NAME,
) -> StepResult[CreatedLetter]:
    """Create a letter document inside the letters folder.

    Steps: ensure folder, create document, insert text, add parent.

    Args:
        client: Client authorized with the caller's token.
        title: Document title. Not a uniqueness key.
        content: Letter text, inserted as one run at the start of the body.
        folder_name: Name of the storage folder.

    Returns:
        StepResult holding the CreatedLetter, or the first failure.
    """
    folder = await run_step("Ensure folder", client.ensure_folder, folder_name)
    if not folder.ok:
        return folder

    created = await run_step("Create document", client.create_document, title)
    if not created.ok:
        return created
    document_id = created.value

    inserted = await run_step(
        "Insert text",
        client.insert_text,
        document_id,
        content,
        DOCUMENT_START_INDEX,
        file_id=document_id,
    )
    if not inserted.ok:
        logger.warning(f"Document {document_id} left without content")
        return inserted

    moved = await run_step(
        "Add parent",
        client.add_parent,
        document_id,
        folder.value.id,
        file_id=document_id,
    )
    if not moved.ok:
        logger.warning(f"Document {document_id} left outside folder {folder.value.id}")
        return moved

    return StepResult.success(
        CreatedLetter(document_id=document_id, folder_id=folder.value.id),
        step="Add parent",
    )


async def list_letters(
    client: LettersClient,
    folder_name: str = LETTERS_FOLDER_NAME,
) -> StepResult[list[LetterSummary]]:
    """List the letters in the storage folder.

    The folder is only looked up, never created; when it is missing the
    result is an empty list.
    """
    folder = await run_step("Find folder", client.find_folder, folder_name)
    if not folder.ok:
        return folder
    if folder.value is None:
        return StepResult.success([], step="Find folder")

    return await run_step(
        "List documents",
        client.list_documents,
        folder.value.id,
        file_id=folder.value.id,
    )


async def read_letter(client: LettersClient, document_id: str) -> StepResult[Letter]:
    """Read one letter back as plain text."""
    return await run_step(
        "Read document",
        client.read_document,
        document_id,
        file_id=document_id,
    )
