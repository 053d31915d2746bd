"""Async wrappers: AsyncResult and AsyncOption.

Both wrap a single awaitable that produces a Result or Option and offer
chainable, lazily evaluated transformations.

Example:
    ```python
    from fallible import Ok, Result
    from fallible.async_ import AsyncResult

    async def fetch(id: int) -> Result[dict, str]:
        return Ok({'id': id})

    async def main():
        result = await AsyncResult(fetch(1)).amap(lambda d: d['id'])
    ```
"""

from fallible.async_.option import AsyncOption
from fallible.async_.result import AsyncResult

__all__ = [
    'AsyncOption',
    'AsyncResult',
]
