class Dispatch(dict):
    """Picks the handler registered for the closest class in a node's MRO."""

    def lookup(self, node):
        for cls in type(node).__mro__:
            if cls in self:
                return self[cls]
        raise KeyError(type(node))

    def __get__(self, instance, owner):
        def wrapper(node, *args, **kwargs):
            return self.lookup(node)(instance, node, *args, **kwargs)
        return wrapper

class VisitorMetaDict(dict):
    def __setitem__(self, name, value):
        if isinstance(value, Dispatch):
            value.update(self.get(name, {}))
        super().__setitem__(name, value)

class VisitorMeta(type):

    @classmethod
    def __prepare__(self, name, bases):
        d = VisitorMetaDict()
        def _(*types):
            def decorator(func):
                return Dispatch({t: func for t in types})
            return decorator
        d['_'] = _
        return d

    def __new__(self, name, bases, attrs):
        attrs.pop("_")
        return type.__new__(self, name, bases, dict(attrs))

class Visitor(metaclass=VisitorMeta):

    def __init__(self, filename="<stdin>"):
        self.filename = filename
