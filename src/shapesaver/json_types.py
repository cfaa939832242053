"""Plain JSON values as produced by `json.loads`.

`shapesaver.value_model` converts between these and the tagged value tree.
"""

from __future__ import annotations

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
