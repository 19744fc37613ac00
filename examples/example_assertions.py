from sinkcheck import DriverHandle, Sink, SinkType, ValueType, enable_sql_echo

handle = DriverHandle(SinkType.ORACLE, host="localhost", port=1521, user="debezium", password="dbz", dbname="FREEPDB1")

with Sink(SinkType.ORACLE, handle) as sink:
    enable_sql_echo(sink)
    print(sink.url)

    sink.assert_column("orders", "id", "NUMBER", precision=10, scale=0)
    sink.assert_column("orders", "name", "VARCHAR2", length=255)

    table = sink.table("orders")
    sink.assert_column_type(table, "id", ValueType.NUMBER, 1, 2)
    sink.assert_column_type(table, "name", ValueType.TEXT, "first", None)

    def check(cur, row):
        print("first row:", row)
        print("next row:", cur.fetchone())

    sink.assert_rows("orders", check)
