from sqlalchemy import func
from nexacms.extensions import db


def next_order(column, *criteria) -> int:
    """
    max(order) + 1 within the scope given by `criteria`; 1 for an empty scope.
    Call inside the transaction that inserts the row.
    """
    current = db.session.query(func.max(column)).filter(*criteria).scalar()
    return (current or 0) + 1

