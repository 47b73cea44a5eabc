"""
Store context: the view handed to store constructors.
"""


class StoreContext:
    """View over a Context for stores; extended only by plugins."""

    def __init__(self, context):
        self._context = context

    def get_store(self, store):
        return self._context.dispatcher.get_store(store)

    def __repr__(self):
        return f"<StoreContext of {self._context!r}>"
