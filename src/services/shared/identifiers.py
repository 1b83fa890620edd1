import uuid


def new_entity_id(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex[:12].upper()}"
