"""Document base class for keyed documents in a DocumentStore."""

from typing import Type, Optional, TypeVar, Generic, Dict, Any
from pydantic import BaseModel, ValidationError as PydanticValidationError

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.exceptions import ServiceError, StoreReadError, ValidationError
from onegoal.util.logger import get_logger

DocLike = TypeVar('DocLike', bound=BaseModel)

logger = get_logger(__name__)


class DocumentBase(Generic[DocLike]):
    """Read-through wrapper around one stored document.

    The document is fetched on construction; it is never cached between
    instances, so every new instance reflects the committed state.
    """
    pydantic_model: Type[DocLike] = None  # type: ignore
    read_error_message = "Failed to load data."

    def __init__(self, id: str, store: Optional[DocumentStore] = None, doc: dict | None = None):
        """
        Initialize the document.
        :param id: Id of the document.
        :param store: Store to read from, Firestore by default.
        :param doc: Already-fetched raw data; skips the read when given.
        """
        self.id = id
        self.store = store or FirestoreDocumentStore()
        self._doc: Optional[DocLike] = None
        # Stored data exactly as read, for callers that must not add defaults
        self.raw: Dict[str, Any] = {}

        if doc is None:
            self._init_doc()
        else:
            self.raw = doc
            self._doc = self._parse(doc)

    def _init_doc(self):
        if not self.pydantic_model:
            raise ServiceError("You forgot to set pydantic_model.")

        try:
            raw = self.store.get(self.id)
        except Exception as e:
            logger.error(f"Failed to read document {self.id}: {e}")
            raise StoreReadError(self.read_error_message, cause=e) from e

        if raw is None:
            self._on_missing()
        self.raw = raw
        self._doc = self._parse(raw)

    def _on_missing(self):
        raise ServiceError(f"Doc not found for entity: {self.id}")

    def _parse(self, raw: Dict[str, Any]) -> DocLike:
        try:
            return self.pydantic_model(**raw)
        except PydanticValidationError as e:
            logger.error(f"Stored document {self.id} is malformed: {e}")
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise ValidationError(
                "Stored data is malformed.", details={"errors": errors}, cause=e
            ) from e

    @property
    def doc(self) -> DocLike:
        if self._doc is not None:
            return self._doc
        raise ServiceError("Document is None")

    def update_doc(self, field_map: Dict[str, Any]):
        """Write dot-path fields. Store errors propagate to the caller."""
        self.store.update(self.id, field_map)
