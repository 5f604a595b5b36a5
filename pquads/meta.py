import copy
import logging


class FieldDescriptor(object):
    """Wrapper around field access of a Message related class."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name in data:
            return data[self.field.name]

        return copy.copy(self.field.default)

    def __set__(self, instance, value):
        data = instance.__dict__

        if value is not None:
            value = self.field.check(value)

            # only one member of a oneof can be set at the same time
            if self.field.oneof:
                for name in instance._meta.oneofs[self.field.oneof]:
                    data.pop(name, None)

        data[self.field.name] = value


class FieldBase(object):

    def contribute_to_message(self, cls, name):
        if name not in cls.__dict__:
            setattr(cls, name, FieldDescriptor(self, name))
        else:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')


class Meta(object):
    """Class containing metadata about the message"""

    def __init__(self):
        self.fields = []
        self.by_tag = {}
        self.oneofs = {}

    def add_field(self, name, field):
        if field.tag in self.by_tag:
            raise AttributeError(f'tag {field.tag} is used by both \'{self.by_tag[field.tag].name}\' and \'{name}\'')

        self.fields.append(name)
        self.by_tag[field.tag] = field
        if field.oneof:
            self.oneofs.setdefault(field.oneof, []).append(name)


class MetaMessage(type):
    logger = logging.getLogger(__name__)

    def __new__(cls, names, bases, attrs):
        '''Collect the fields declared in the class body, in order, in "_meta".'''
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaMessage, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaMessage)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                obj = parent.__dict__[obj_name].field
                new_cls.add_to_class(obj_name, obj)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_message'):
            cls.logger.debug('contribute_to_message() found for field \'%s\'' % name)
            value.contribute_to_message(cls, name)
            cls._meta.add_field(name, value)
        else:
            setattr(cls, name, value)
