"""Query-string driven filtering, sorting, field selection and pagination.

``translate_query`` turns the raw query-string map of a request into a
``QuerySpec``. It never fails: keys it does not understand are passed through
as literal equality filters. ``apply_filters`` and ``apply_sort`` are the
query-engine side and reject fields or values that do not fit the model.

Example::

    /bootcamps?average_cost[lte]=10000&select=name,careers&sort=-name&page=2

yields a filter ``average_cost <= 10000``, the selected fields
``["name", "careers"]``, a descending sort on ``name`` and page 2.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app
from sqlalchemy import JSON, String, and_, cast, or_

from errors import NotFound, ValidationError
from extensions import db

RESERVED_PARAMS = ('select', 'sort', 'page', 'limit')
OPERATORS = ('gt', 'gte', 'lt', 'lte', 'in')

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25

# page and limit above this fall back to their defaults, so skip fits a 64-bit offset
MAX_QUERY_INT = 2 ** 31 - 1

_OPERATOR_KEY = re.compile(r'^(?P<field>[^\[\]]+)\[(?P<op>gt|gte|lt|lte|in)\]$')


@dataclass
class Filter:
    field: str
    op: str  # 'eq' or one of OPERATORS
    value: Any  # str, or list of str for 'in'


@dataclass
class QuerySpec:
    filters: List[Filter] = field(default_factory=list)
    select: Optional[List[str]] = None
    sort: List[Tuple[str, str]] = field(default_factory=lambda: [('created_at', 'desc')])
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _values(args, key) -> List[str]:
    if hasattr(args, 'getlist'):
        return args.getlist(key)
    value = args[key]
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _split(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


def _positive_int(raw, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if 0 < value <= MAX_QUERY_INT else default


def translate_query(args, default_limit: int = DEFAULT_LIMIT, max_limit: Optional[int] = None) -> QuerySpec:
    """Build a QuerySpec from a query-string mapping (dict or MultiDict)."""
    spec = QuerySpec(limit=default_limit)

    for key in args.keys():
        if key in RESERVED_PARAMS:
            continue
        values = _values(args, key)
        if not values:
            continue
        match = _OPERATOR_KEY.match(key)
        if match is None:
            spec.filters.append(Filter(key, 'eq', values[-1]))
        elif match.group('op') == 'in':
            members = [member for value in values for member in _split(value)]
            spec.filters.append(Filter(match.group('field'), 'in', members))
        else:
            spec.filters.append(Filter(match.group('field'), match.group('op'), values[-1]))

    select = args.get('select')
    if select:
        spec.select = _split(select)

    sort = args.get('sort')
    if sort:
        keys = []
        for name in _split(sort):
            if name.startswith('-'):
                keys.append((name[1:], 'desc'))
            else:
                keys.append((name.lstrip('+'), 'asc'))
        if keys:
            spec.sort = keys

    spec.page = _positive_int(args.get('page'), DEFAULT_PAGE)
    spec.limit = _positive_int(args.get('limit'), default_limit)
    if max_limit:
        spec.limit = min(spec.limit, max_limit)
    return spec


def _column(model, name: str):
    """Resolve a query field to a column, accepting the serialized names of ``QUERY_FIELDS``."""
    column_name = getattr(model, 'QUERY_FIELDS', {}).get(name, name)
    column = model.__table__.columns.get(column_name)
    if column is None or column_name in getattr(model, 'HIDDEN_FIELDS', ()):
        raise ValidationError(f'Invalid query field: {name}')
    return column


def _is_list_column(column) -> bool:
    return isinstance(column.type, JSON)


def _coerce(column, raw):
    """Cast a query-string value to the python type of ``column``."""
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw
    try:
        if python_type is bool:
            lowered = str(raw).lower()
            if lowered not in ('true', 'false', '1', '0'):
                raise ValueError(raw)
            return lowered in ('true', '1')
        if python_type is datetime:
            return datetime.fromisoformat(str(raw))
        if python_type is int:
            value = int(raw)
            if abs(value) > 2 ** 63 - 1:
                raise ValueError(raw)
            return value
        if python_type is float:
            return float(raw)
    except ValueError:
        raise ValidationError(f'Invalid value for {column.name}: {raw}')
    return raw


def _list_membership(column, members):
    # JSON arrays are stored as text, match on the quoted element
    return or_(*[cast(column, String).like(f'%"{member}"%') for member in members])


def apply_filters(statement, model, filters: List[Filter]):
    """Add WHERE clauses for ``filters`` to a select statement on ``model``."""
    clauses = []
    for flt in filters:
        column = _column(model, flt.field)
        if _is_list_column(column):
            if flt.op not in ('eq', 'in'):
                raise ValidationError(f'Operator {flt.op} is not supported for {flt.field}')
            members = flt.value if flt.op == 'in' else [flt.value]
            clauses.append(_list_membership(column, members))
            continue

        if flt.op == 'in':
            clauses.append(column.in_([_coerce(column, v) for v in flt.value]))
            continue

        value = _coerce(column, flt.value)
        if flt.op == 'eq':
            clauses.append(column == value)
        elif flt.op == 'gt':
            clauses.append(column > value)
        elif flt.op == 'gte':
            clauses.append(column >= value)
        elif flt.op == 'lt':
            clauses.append(column < value)
        elif flt.op == 'lte':
            clauses.append(column <= value)

    if clauses:
        statement = statement.where(and_(*clauses))
    return statement


def apply_sort(statement, model, sort: List[Tuple[str, str]]):
    order = []
    for name, direction in sort:
        column = _column(model, name)
        order.append(column.desc() if direction == 'desc' else column.asc())
    # Stable ordering for rows sharing a sort value
    order.append(model.id.desc() if sort[-1][1] == 'desc' else model.id.asc())
    return statement.order_by(*order)


def project(data: Dict[str, Any], select: Optional[List[str]]) -> Dict[str, Any]:
    """Keep only the selected fields of a serialized record, plus its id."""
    if not select:
        return data
    return {key: data[key] for key in ['id', *select] if key in data}


def build_pagination(page: int, limit: int, total: int) -> Dict[str, Dict[str, int]]:
    skip = (page - 1) * limit
    pagination = {}
    if skip + limit < total:
        pagination['next'] = {'page': page + 1, 'limit': limit}
    if skip > 0:
        pagination['prev'] = {'page': page - 1, 'limit': limit}
    return pagination


def advanced_results(model, args, statement=None, populate: bool = False) -> Dict[str, Any]:
    """Run a filtered, sorted, paginated query and wrap it in the list envelope.

    The total used for the pagination descriptors comes from a separate count
    over the same filter, so it can drift from the window under concurrent
    writes.
    """
    spec = translate_query(
        args,
        default_limit=current_app.config.get('RESULTS_PER_PAGE', DEFAULT_LIMIT),
        max_limit=current_app.config.get('RESULTS_MAX_LIMIT'),
    )
    if statement is None:
        statement = db.select(model)
    statement = apply_filters(statement, model, spec.filters)

    total = db.session.scalar(db.select(db.func.count()).select_from(statement.subquery()))

    window = apply_sort(statement, model, spec.sort).offset(spec.skip).limit(spec.limit)
    results = db.session.execute(window).scalars().all()

    data = [project(record.to_dict(populate=populate), spec.select) for record in results]
    return {
        'success': True,
        'count': len(data),
        'pagination': build_pagination(spec.page, spec.limit, total),
        'data': data,
    }


def get_by_id(model, resource_id):
    """Load one record by primary key or raise NotFound.

    Ids that are not integers are reported the same way as missing ones.
    """
    try:
        pk = int(resource_id)
    except (TypeError, ValueError):
        raise NotFound.for_id(resource_id)
    record = db.session.get(model, pk)
    if record is None:
        raise NotFound.for_id(resource_id)
    return record
