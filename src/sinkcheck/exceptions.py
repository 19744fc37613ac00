class SinkError(Exception):
    """Base class for sink errors that are not assertion failures."""

class SinkClosedError(SinkError, RuntimeError):
    pass

class UnsupportedSinkError(SinkError, NotImplementedError):
    pass

class ColumnNotFoundError(AssertionError):
    def __init__(self, table_name: str, column_name: str):
        super().__init__(f"Column {column_name} not found in table {table_name}.")
        self.table_name = table_name; self.column_name = column_name
