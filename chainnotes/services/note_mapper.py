"""
Pure transforms between stored note payloads and the Note schema.

Stored payloads use the registry's legacy shape: flat "content" and
"summary" strings and no "related_urls". Callers exchange structured
"body"/"summary". Both directions return new dicts and never mutate their
inputs.
"""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from chainnotes.config import NotesConfig
from chainnotes.models.events import NoteEvent
from chainnotes.models.note import Note
from chainnotes.utils.exceptions import ValidationError
from chainnotes.utils.ipfs import replace_ipfs
from chainnotes.utils.logger import get_logger
from chainnotes.utils.mime import get_mime_type
from chainnotes.utils.note_id import format_note_id

logger = get_logger(__name__)

UrlRewriter = Callable[[str], str]
MimeSniffer = Callable[[str], str]

# Fields set from the ledger event, never from the stored payload
LEDGER_FIELDS = frozenset(
    {"id", "date_created", "date_updated", "related_urls", "authors", "source", "metadata"}
)


def build_related_urls(
    event: NoteEvent,
    explorer_url: str,
    rewrite_url: UrlRewriter = replace_ipfs,
) -> list[str]:
    """
    Collect the URLs a note relates to, in fixed order.

    Order: external target, rewritten payload URL, creation transaction,
    then the update transaction only when it differs from the creation.
    """
    urls = []
    if event.to_uri:
        urls.append(event.to_uri)
    if event.uri:
        urls.append(rewrite_url(event.uri))
    urls.append(f"{explorer_url}{event.transaction_hash}")
    if (
        event.updated_transaction_hash
        and event.updated_transaction_hash != event.transaction_hash
    ):
        urls.append(f"{explorer_url}{event.updated_transaction_hash}")
    return urls


def build_transactions(event: NoteEvent) -> list[str]:
    transactions = [event.transaction_hash]
    if event.updated_transaction_hash and event.updated_transaction_hash != event.transaction_hash:
        transactions.append(event.updated_transaction_hash)
    return transactions


def restore_legacy_fields(
    item: dict[str, Any],
    default_mime_type: str = "text/markdown",
    rewrite_url: UrlRewriter = replace_ipfs,
    sniff_mime: MimeSniffer = get_mime_type,
) -> dict[str, Any]:
    """
    Convert a stored payload into structured form.

    - flat "summary" string -> {"content", "mime_type"}
    - flat "content" string -> "body", and "content" is dropped
    - attachment addresses rewritten to gateway URLs, missing MIME types inferred

    Empty or non-string flat values are dropped, as are attachment entries
    that are not objects.
    """
    result = dict(item)

    summary = result.pop("summary", None)
    if summary and isinstance(summary, str):
        result["summary"] = {"content": summary, "mime_type": default_mime_type}
    elif isinstance(summary, dict):
        result["summary"] = summary

    content = result.pop("content", None)
    if content and isinstance(content, str):
        result["body"] = {"content": content, "mime_type": default_mime_type}

    attachments = result.pop("attachments", None)
    if isinstance(attachments, list):
        restored = []
        for attachment in attachments:
            if not isinstance(attachment, dict):
                continue
            attachment = dict(attachment)
            if attachment.get("address") and isinstance(attachment["address"], str):
                attachment["address"] = rewrite_url(attachment["address"])
                if not attachment.get("mime_type"):
                    attachment["mime_type"] = sniff_mime(attachment["address"])
            restored.append(attachment)
        result["attachments"] = restored

    return result


def _validate_note(item: dict[str, Any], defaults: dict[str, Any]) -> Note:
    """
    Validate a mapped item, discarding payload fields that do not fit the schema.

    Payloads are written by arbitrary clients, so an ill-typed field
    (non-string tags, unparseable dates, ...) is dropped or reset to its
    default instead of failing the note. Ledger-derived fields are never
    dropped.
    """
    item = dict(item)
    while True:
        try:
            return Note.model_validate(item)
        except PydanticValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            droppable = invalid - LEDGER_FIELDS
            if not droppable or invalid & LEDGER_FIELDS:
                raise
            logger.warning(
                f"Dropping invalid payload fields of note {item.get('id')}: {sorted(droppable)}"
            )
            for field in droppable:
                if field in defaults and item.get(field) != defaults[field]:
                    item[field] = defaults[field]
                else:
                    item.pop(field, None)


def event_to_note(
    event: NoteEvent,
    profile_id: int | str | None,
    identity: str | None,
    config: NotesConfig,
    rewrite_url: UrlRewriter = replace_ipfs,
    sniff_mime: MimeSniffer = get_mime_type,
) -> Note:
    """
    Map a ledger event to a Note.

    The stored payload is laid over a default publication date, then the
    ledger-derived fields override anything the payload carries.

    Args:
        event: Raw event from the index reader
        profile_id: Resolved profile handle (falls back to the event's own)
        identity: Requesting identity, recorded as the sole author
        config: Note mapping configuration
        rewrite_url: Content-store URL rewriter
        sniff_mime: MIME type inference for attachments

    Returns:
        Normalized note
    """
    owner_id = profile_id if profile_id is not None else event.profile_id
    note_id = format_note_id(owner_id, event.note_id)

    item: dict[str, Any] = {"date_published": event.created_at}
    item.update(event.content)
    item.update(
        {
            "id": note_id,
            "date_created": event.created_at,
            "date_updated": event.updated_at,
            "related_urls": build_related_urls(event, config.explorer_url, rewrite_url),
            "authors": [identity] if identity else [],
            "source": config.source,
            "metadata": {
                "network": config.network,
                "proof": note_id,
                "block_number": event.block_number,
                "owner": event.owner,
                "transactions": build_transactions(event),
            },
        }
    )

    item = restore_legacy_fields(
        item,
        default_mime_type=config.default_mime_type,
        rewrite_url=rewrite_url,
        sniff_mime=sniff_mime,
    )
    return _validate_note(item, defaults={"date_published": event.created_at})


def prepare_for_storage(payload: dict[str, Any]) -> tuple[dict[str, Any], str | None]:
    """
    Flatten caller input into the stored payload shape.

    - "body.content" -> flat "content", "body" dropped
    - "summary.content" -> flat "summary"
    - a single "related_urls" entry becomes the external target URL and the
      field is dropped; "id" is dropped

    Returns:
        Tuple of (stored payload, external target URL or None)

    Raises:
        ValidationError: If more than one related URL is given
    """
    related_urls = payload.get("related_urls") or []
    if len(related_urls) > 1:
        raise ValidationError(
            "Only one related_url is allowed", context={"related_urls": list(related_urls)}
        )
    target_uri = related_urls[0] if related_urls else None

    stored = {
        key: value for key, value in payload.items() if key not in ("related_urls", "id", "body")
    }

    body = payload.get("body")
    if body:
        stored["content"] = body["content"] if isinstance(body, dict) else body

    summary = payload.get("summary")
    if isinstance(summary, dict):
        stored["summary"] = summary.get("content")

    return stored, target_uri


def merge_payload(existing: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge where fields of ``update`` replace same-named fields of ``existing``."""
    return {**existing, **update}
