from pydantic import BaseModel


class RequestContext(BaseModel):
    """
    Per-request caller state handed to services.

    Built from the incoming HTTP request by web.dependencies.get_request_context,
    so services never touch the framework request object.
    """
    token: str | None = None
    language: str
    client_ip: str | None = None
