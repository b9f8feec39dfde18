class DomainError(ValueError):
    """Raised when a value or cut falls outside what a domain can represent.

    Typical causes are asking for the value above a domain's maximum (or
    below its minimum), asking for the neighbour of an open cut in a dense
    domain, or mixing intervals of different domains in one set.
    """
