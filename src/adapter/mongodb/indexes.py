"""Index creation shared by the Mongo repositories."""

from logging import getLogger

from pymongo.errors import OperationFailure

logger = getLogger(__name__)

# Server error codes for an existing index that clashes with the requested one
INDEX_OPTIONS_CONFLICT = 85  # same keys, different name or options
INDEX_KEY_SPECS_CONFLICT = 86  # same name, different keys or options


def create_index(collection, keys: list, name: str, **kwargs) -> None:
    """Create ``name`` on ``collection``, replacing an older index that clashes with it.

    This is how a pre-existing non-unique ``email`` index becomes the unique
    ``idx_users_email``. Any other failure propagates.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return
    except OperationFailure as e:
        if e.code not in (INDEX_OPTIONS_CONFLICT, INDEX_KEY_SPECS_CONFLICT):
            raise

    stale = _clashing_index(collection, keys, name)
    if stale is None:
        raise OperationFailure(f"Index conflict on {name} but no clashing index found")

    logger.warning("Replacing index", extra={"index": name, "dropped": stale})
    collection.drop_index(stale)
    collection.create_index(keys, name=name, **kwargs)


def _clashing_index(collection, keys: list, name: str) -> str | None:
    wanted = dict(keys)
    for idx_name, info in collection.index_information().items():
        if idx_name == '_id_':
            continue
        if idx_name == name or dict(info.get('key', [])) == wanted:
            return idx_name
    return None
