import asyncio


def run(coro):
    # Streamlit scripts are synchronous; each handler gets its own event loop.
    return asyncio.run(coro)
