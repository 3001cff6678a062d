"""Application constants.

Index mapping for the subject documents and the plain-text confirmation
messages returned by the write endpoints.
"""

from typing import Any

# ---------------------------------------------------------------------------
# Elasticsearch index definition
# ---------------------------------------------------------------------------
SUBJECT_INDEX_SETTINGS: dict[str, Any] = {}

SUBJECT_INDEX_MAPPINGS: dict[str, Any] = {
    "properties": {
        "ma_mh": {"type": "text"},
        "ten_mon_hoc": {"type": "text"},
        "gvcn": {"type": "text"},
        "so_tin_chi": {"type": "integer"},
        "created_at": {"type": "date"},
    }
}

# ---------------------------------------------------------------------------
# Response messages
# ---------------------------------------------------------------------------
MSG_CREATED = "Subject created successfully!"
MSG_UPDATED = "Subject updated successfully!"
MSG_DELETED = "Subject deleted successfully!"

MSG_INVALID_INPUT = "Invalid input"
MSG_NOT_FOUND = "Subject not found"
MSG_ENCODE_FAILED = "Error marshaling subject data"
MSG_DECODE_FAILED = "Error decoding response"
MSG_INDEX_FAILED = "Error indexing document"
MSG_UPDATE_FAILED = "Error updating document"
MSG_DELETE_FAILED = "Error deleting subject"
