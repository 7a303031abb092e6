import json
import warnings
import torch
from addict import Dict
from mlspaces.spaces import BinarySpace
from mlspaces.spaces import DiscreteSpace
from mlspaces.spaces import IntervalSpace
from mlspaces.spaces import NaturalsSpace
from mlspaces.spaces import NullSpace
from mlspaces.spaces import ProductSpace
from mlspaces.spaces import SingletonSpace
from mlspaces.spaces import UnionSpace

# keys of the record of each space type, besides 'type'
RECORD_FIELDS = {
    'interval': ('low', 'high', 'left_closed', 'right_closed', 'dtype', 'config'),
    'naturals': ('config',),
    'discrete': ('labels', 'start', 'stop', 'step'),
    'binary': (),
    'singleton': ('value', 'dtype'),
    'null': (),
    'product': ('spaces',),
    'union': ('branches',),
}


def _dtype_name(dtype):
    return str(dtype).replace('torch.', '')


def _parse_dtype(name):
    dtype = getattr(torch, name, None)
    if not isinstance(dtype, torch.dtype):
        raise ValueError('Unknown dtype {!r} in space record!'.format(name))
    return dtype


def to_dict(space):
    """Describe a space by a self-describing record (an addict Dict of plain values).

    Example::

        >>> to_dict(ProductSpace([DiscreteSpace(3), BinarySpace()]))
        {'type': 'product', 'spaces': [{'type': 'discrete', 'start': 0, 'stop': 3, 'step': 1}, {'type': 'binary'}]}
    """
    if isinstance(space, NaturalsSpace):
        return Dict(type='naturals', config=space.config.to_dict())
    elif isinstance(space, IntervalSpace):
        return Dict(type='interval', low=space.low, high=space.high, left_closed=space.left_closed,
                    right_closed=space.right_closed, dtype=_dtype_name(space.dtype), config=space.config.to_dict())
    elif isinstance(space, DiscreteSpace):
        if space.labels is not None:
            return Dict(type='discrete', labels=list(space.labels))
        return Dict(type='discrete', start=space.range.start, stop=space.range.stop, step=space.range.step)
    elif isinstance(space, BinarySpace):
        return Dict(type='binary')
    elif isinstance(space, SingletonSpace):
        if isinstance(space.value, torch.Tensor):
            return Dict(type='singleton', value=space.value.tolist(), dtype=_dtype_name(space.value.dtype))
        return Dict(type='singleton', value=space.value)
    elif isinstance(space, NullSpace):
        return Dict(type='null')
    elif isinstance(space, ProductSpace):
        return Dict(type='product', spaces=[to_dict(s) for s in space.spaces])
    elif isinstance(space, UnionSpace):
        return Dict(type='union', branches=[Dict(tag=tag, space=to_dict(s)) for tag, s in space.spaces.items()])
    else:
        raise NotImplementedError


def _as_label(label):
    # sequences come back as lists from JSON
    if isinstance(label, list):
        return tuple([_as_label(part) for part in label])
    return label


def _require(record, *keys):
    missing = [key for key in keys if key not in record]
    if missing:
        raise ValueError('{} space record is missing {}'.format(record['type'], ", ".join(missing)))


def from_dict(record):
    """Rebuild the space described by a record produced by ``to_dict()``.

    Raises ``ValueError`` for records of unknown type or with missing keys. Unknown keys are ignored with a warning.
    """
    if 'type' not in record:
        raise ValueError('space record has no type')
    space_type = record['type']
    if space_type not in RECORD_FIELDS:
        raise ValueError('Unknown space type {!r} in space record!'.format(space_type))
    unknown_keys = [key for key in record if key != 'type' and key not in RECORD_FIELDS[space_type]]
    if unknown_keys:
        warnings.warn('ignoring unknown keys {} of {} space record'.format(unknown_keys, space_type))

    if space_type == 'interval':
        _require(record, 'low', 'high')
        return IntervalSpace(low=record['low'], high=record['high'],
                             left_closed=record.get('left_closed', True), right_closed=record.get('right_closed', True),
                             dtype=_parse_dtype(record.get('dtype', 'float64')), config=record.get('config', {}))
    elif space_type == 'naturals':
        return NaturalsSpace(config=record.get('config', {}))
    elif space_type == 'discrete':
        if 'labels' in record:
            return DiscreteSpace(labels=[_as_label(label) for label in record['labels']])
        _require(record, 'stop')
        return DiscreteSpace(range(record.get('start', 0), record['stop'], record.get('step', 1)))
    elif space_type == 'binary':
        return BinarySpace()
    elif space_type == 'singleton':
        _require(record, 'value')
        if 'dtype' in record:
            return SingletonSpace(torch.tensor(record['value'], dtype=_parse_dtype(record['dtype'])))
        return SingletonSpace(_as_label(record['value']))
    elif space_type == 'null':
        return NullSpace()
    elif space_type == 'product':
        _require(record, 'spaces')
        return ProductSpace([from_dict(r) for r in record['spaces']])
    else:
        _require(record, 'branches')
        return UnionSpace([(_as_label(branch['tag']), from_dict(branch['space'])) for branch in record['branches']])


def to_json(space, **kwargs):
    """Serialize a space to a JSON string, kwargs are passed to ``json.dumps``."""
    return json.dumps(to_dict(space), **kwargs)


def from_json(s):
    return from_dict(json.loads(s))
