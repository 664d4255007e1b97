"""Token identity: comparison keys and display labels."""

from pairscope.ingestion.models import Token


def address_key(token: Token) -> str:
    """Lower-cased address, the sole equality/ordering key for tokens."""
    return token.key


def get_token_label(token: Token) -> str:
    """Human label for a token.

    The symbol when it is non-blank; otherwise a shortened address of the
    form ``0xAbCd...1234`` (first 6, last 4), or the full address if it is
    shorter than 10 characters.
    """
    if token.symbol is not None and token.symbol.strip() != "":
        return token.symbol
    addr = token.address
    if len(addr) >= 10:
        return f"{addr[:6]}...{addr[-4:]}"
    return addr
