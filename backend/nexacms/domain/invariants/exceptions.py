from nexacms.domain.errors import BadInput


class InvariantViolation(BadInput):
    kind = "InvariantViolation"
