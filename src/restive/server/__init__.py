"""Server side — ASGI request pipeline, error mapping, response sending."""
