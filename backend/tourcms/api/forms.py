"""Request body parsing shared by the content routers.

Admin screens post multipart forms (with files); scripts post JSON. Both end
up as a plain dict of values plus a dict of uploaded files per field.
"""
from typing import Any, Dict, List, Tuple

from fastapi import HTTPException, Request
from starlette.datastructures import UploadFile


def _field_name(key: str) -> str:
    # FormData from the browser often names list fields "alt_texts[]"
    return key[:-2] if key.endswith("[]") else key


async def parse_body(request: Request) -> Tuple[Dict[str, Any], Dict[str, List[UploadFile]]]:
    """Values and files of the request body.

    Used as a dependency so the endpoints themselves stay plain ``def`` and run
    in the threadpool.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Request body is not valid JSON.")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Request body must be a JSON object.")
        return body, {}

    if not (content_type.startswith("multipart/form-data")
            or content_type.startswith("application/x-www-form-urlencoded")):
        return {}, {}

    form = await request.form()
    values: Dict[str, List[Any]] = {}
    files: Dict[str, List[UploadFile]] = {}
    for key, value in form.multi_items():
        name = _field_name(key)
        if isinstance(value, UploadFile):
            # Empty file inputs still arrive as a part without a filename
            if value.filename:
                files.setdefault(name, []).append(value)
            continue
        values.setdefault(name, []).append(None if value == "" else value)

    data = {k: (v[0] if len(v) == 1 else v) for k, v in values.items()}
    return data, files


def as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
