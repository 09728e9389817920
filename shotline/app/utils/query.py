import math

from flask import current_app
from sqlalchemy import or_

from shotline.app.utils import fields


def get_paginated_results(query, page, limit=None, relations=False):
    """
    Apply pagination to the query object. When no page is requested, every
    entry is returned as a plain list.
    """
    if page is None or page < 1:
        entries = query.all()
        return fields.serialize_models(entries, relations=relations)
    else:
        limit = limit or current_app.config["NB_RECORDS_PER_PAGE"]
        total = query.count()
        offset = (page - 1) * limit

        nb_pages = int(math.ceil(total / float(limit)))
        query = query.limit(limit)
        query = query.offset(offset)

        if total < offset:
            result = {
                "data": [],
                "total": 0,
                "nb_pages": nb_pages,
                "limit": limit,
                "offset": offset,
                "page": page,
            }
        else:
            models = fields.serialize_models(query.all(), relations=relations)
            result = {
                "data": models,
                "total": total,
                "nb_pages": nb_pages,
                "limit": limit,
                "offset": offset,
                "page": page,
            }
        return result


def apply_text_search(query, search, *columns):
    """
    Keep entries for which one of given columns contains the search string.
    """
    if not search:
        return query
    pattern = f"%{search}%"
    clauses = [column.ilike(pattern) for column in columns]
    return query.filter(or_(*clauses))
