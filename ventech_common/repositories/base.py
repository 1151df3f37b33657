"""Base repository providing common MongoDB CRUD helpers."""

from abc import ABC
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult, UpdateResult


class CollectionName(str, Enum):
    USERS = "users"
    PRODUCTS = "products"
    DONATION_REQUESTS = "donation_requests"
    BLOGS = "blogs"
    FUNDINGS = "fundings"
    CONTACTS = "mailbox"


T = TypeVar("T", bound=BaseModel)


def to_object_id(entity_id: Union[str, ObjectId, None]) -> Optional[ObjectId]:
    """Parse an id from a path or query; malformed ids yield None."""
    if entity_id is None:
        return None
    if isinstance(entity_id, ObjectId):
        return entity_id
    try:
        return ObjectId(entity_id)
    except (InvalidId, TypeError):
        return None


class BaseRepository(ABC, Generic[T]):
    """Base repository providing common CRUD operations for MongoDB collections."""

    def __init__(
        self,
        db: Database,
        collection_name: Union[CollectionName, str],
        model_class: Type[T],
    ):
        self.db = db
        self.collection_name: str = (
            collection_name.value
            if isinstance(collection_name, CollectionName)
            else collection_name
        )
        self.collection: Collection = db[self.collection_name]
        self.model_class = model_class

    def find_by_id(self, entity_id: Union[str, ObjectId]) -> Optional[T]:
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return None
        doc = self.collection.find_one({"_id": identifier})
        return self._to_model(doc)

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        doc = self.collection.find_one(query)
        return self._to_model(doc)

    def find_many(
        self,
        query: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[T]:
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_model(doc) for doc in cursor if doc]

    def paginate(
        self,
        query: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> Tuple[List[T], int]:
        """Return paginated results plus total count for the query."""
        total = self.collection.count_documents(query)
        return self.find_many(query, sort=sort, skip=skip, limit=limit), total

    def insert_one(self, entity: T) -> T:
        doc = entity.model_dump(by_alias=True, exclude_none=True)
        doc.pop("_id", None)
        result = self.collection.insert_one(doc)
        return self.find_by_id(result.inserted_id)

    def update_where(
        self, query: Dict[str, Any], update: Dict[str, Any]
    ) -> UpdateResult:
        """Apply a raw update document to the first match of ``query``."""
        return self.collection.update_one(query, update)

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
    ) -> Optional[T]:
        doc = self.collection.find_one_and_update(
            query,
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(doc)

    def delete(self, entity_id: Union[str, ObjectId]) -> bool:
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return False
        result = self.collection.delete_one({"_id": identifier})
        return result.deleted_count > 0

    def delete_where(self, query: Dict[str, Any]) -> DeleteResult:
        return self.collection.delete_one(query)

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        if not doc:
            return None
        return self.model_class.model_validate(doc)

    def _to_object_id(
        self, entity_id: Union[str, ObjectId, None]
    ) -> Optional[ObjectId]:
        return to_object_id(entity_id)
