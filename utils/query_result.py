from typing import Any

from pydantic import BaseModel


def query_result_to_json(data: Any, status: str = "success") -> dict:
    """
    Wrap a query result in the API response envelope.

    Pydantic models and lists of them are dumped in JSON mode, so datetimes
    become ISO strings and the result is ready for JSONResponse.

    Example:
        >>> query_result_to_json({"id": 1})
        {'status': 'success', 'data': {'id': 1}}
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    elif isinstance(data, list):
        data = [item.model_dump(mode="json") if isinstance(item, BaseModel) else item for item in data]
    return {"status": status, "data": data}
