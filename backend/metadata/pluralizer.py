"""Resource-name pluralization."""

import inflect


class Pluralizer:
    """English pluralizer used for default resource names."""

    def __init__(self):
        self._engine = inflect.engine()
        # type names are capitalized; don't pluralize them as proper names
        self._engine.classical(names=False)

    def pluralize(self, noun: str) -> str:
        if not noun:
            return noun
        return self._engine.plural_noun(noun)
