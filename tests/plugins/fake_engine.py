"""Stand-in SQL engine module used as an import target in tests."""


class Engine:
    def query(self, sql):
        return [("ok",)]


NOTHING = None
