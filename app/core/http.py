import httpx


# One outbound client per chat request, closed when the request is done.
# Tests swap this out with a client on an httpx.MockTransport.
async def get_http_client():
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client
