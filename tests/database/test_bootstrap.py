from chronolog.database.bootstrap import _strip_create_db_and_use, iter_sql_statements
from chronolog.database.connection import DBConfig


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_splitter_handles_escaped_quote():
    sql = "INSERT INTO t VALUES ('it\\'s;fine');"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('it\\'s;fine')"]


def test_strip_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS chronolog;\nUSE chronolog;\nCREATE TABLE x (id INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE x (id INT)"]


def test_db_config_from_dict_defaults():
    config = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert config == DBConfig(host="db", port=3307, user="root", password="", database="chronolog")
    assert config.describe() == "root@db:3307/chronolog"
