import copy
import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()


class FieldDescriptor(object):
    """The field declared in the class body is a template: each chunk
    instance gets its own copy the first time the attribute is read."""

    def __init__(self, template: "FieldBase", name: str):
        self.template = template
        self.template.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self.template

        fields = instance.__dict__
        name = self.template.name

        if name not in fields:
            logger.debug("instancing field '%s' of %s", name, owner.__name__ if owner else '?')
            fields[name] = self.template.create(father=instance)

        return fields[name]


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        cls._meta.fields.append(name)
        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self, fields=()):
        self.fields = list(fields)


class MetaChunk(type):
    '''The fields found in the class body are turned into descriptors, and
    their names are stored in declaration order in _meta.fields, after the
    ones inherited from the parent chunks.'''

    def __new__(cls, name, bases, attrs):
        declared = {k: v for k, v in attrs.items() if isinstance(v, FieldBase)}
        body = {k: v for k, v in attrs.items() if k not in declared}

        new_cls = super().__new__(cls, name, bases, body)

        inherited = [_ for base in bases if isinstance(base, MetaChunk) for _ in base._meta.fields]
        new_cls._meta = Meta(inherited)

        for field_name, field in declared.items():
            field.contribute_to_chunk(new_cls, field_name)

        return new_cls
