"""
Statement dispatch and registry tests.
"""
import pytest

from sql2json.models import ParserState
from sql2json.registry import TableRegistry
from sql2json.statement_parser import parse_statement


@pytest.fixture
def state():
    return ParserState()


@pytest.fixture
def registry():
    return TableRegistry()


def run_all(statements, state, registry, **kwargs):
    results = []
    for sql in statements:
        results.append(parse_statement(sql, state, registry, **kwargs))
    return results


class TestDispatch:

    def test_create_then_insert(self, state, registry):
        run_all(["CREATE TABLE t (a INT, b VARCHAR(10))",
                 "INSERT INTO t VALUES (1,'x'),(2,'y');"], state, registry)
        assert registry.get("t")["data"] == [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]
        assert state.current_table == "t"
        assert state.processed_statements == 2

    def test_short_and_long_rows(self, state, registry):
        run_all(["CREATE TABLE t (a INT, b INT, c INT)",
                 "INSERT INTO t VALUES (1,2)",
                 "INSERT INTO t VALUES (1,2,3,4)"], state, registry)
        assert registry.get("t")["data"] == [{"a": 1, "b": 2}, {"a": 1, "b": 2, "c": 3}]

    def test_orphan_insert_ignored(self, state, registry, capsys):
        assert parse_statement("INSERT INTO ghost VALUES (1)", state, registry) is True
        assert len(registry) == 0
        assert capsys.readouterr().err == ""

    def test_recreate_replaces_table(self, state, registry):
        run_all(["CREATE TABLE t (a INT)",
                 "INSERT INTO t VALUES (1)",
                 "CREATE TABLE t (x INT, y INT)"], state, registry)
        assert registry.get("t") == {
            "tableName": "t",
            "columns": [{"name": "x", "type": "INT"}, {"name": "y", "type": "INT"}],
            "data": [],
        }

    def test_drop_table_ignored(self, state, registry):
        run_all(["CREATE TABLE t (a INT)", "DROP TABLE IF EXISTS `t`;",
                 "drop table t"], state, registry)
        assert "t" in registry
        assert state.processed_statements == 3

    def test_transaction_markers(self, state, registry):
        parse_statement("START TRANSACTION;", state, registry)
        assert state.inside_transaction is True
        parse_statement("COMMIT;", state, registry)
        assert state.inside_transaction is False

    def test_transaction_markers_are_case_sensitive(self, state, registry):
        parse_statement("start transaction", state, registry)
        assert state.inside_transaction is False

    def test_unknown_statement_is_noop(self, state, registry):
        assert parse_statement("SET NAMES utf8mb4;", state, registry) is True
        assert parse_statement("/*!40101 SET @OLD=@@X */;", state, registry) is True
        assert len(registry) == 0
        assert state.processed_statements == 2

    def test_blank_statement_not_counted(self, state, registry):
        assert parse_statement("   ", state, registry) is True
        assert state.processed_statements == 0

    def test_unparsable_create_does_not_register(self, state, registry):
        assert parse_statement("CREATE TABLE broken", state, registry) is True
        assert len(registry) == 0
        assert state.current_table is None


class TestLimit:

    def test_limit_stops_before_processing(self, state, registry):
        results = run_all(["CREATE TABLE t (a INT)",
                           "INSERT INTO t VALUES (1)",
                           "INSERT INTO t VALUES (2)"], state, registry, limit=2)
        assert results == [True, True, False]
        assert registry.get("t")["data"] == [{"a": 1}]
        assert state.processed_statements == 3

    def test_no_limit(self, state, registry):
        results = run_all(["SELECT 1"] * 5, state, registry, limit=None)
        assert all(results)


class TestTableRegistry:

    def test_append_to_unknown_table(self, registry):
        assert registry.append_records("nope", [[1]]) == 0

    def test_totals_and_order(self, registry):
        registry.register({"tableName": "b", "columns": [{"name": "x", "type": "INT"}], "data": []})
        registry.register({"tableName": "a", "columns": [{"name": "x", "type": "INT"}], "data": []})
        assert registry.append_records("b", [[1], [2]]) == 2
        registry.append_records("a", [[3]])
        assert registry.table_names() == ["b", "a"]
        assert registry.total_records() == 3

    def test_replaced_table_keeps_position(self, registry):
        registry.register({"tableName": "a", "columns": [], "data": []})
        registry.register({"tableName": "b", "columns": [], "data": []})
        registry.register({"tableName": "a", "columns": [], "data": []})
        assert registry.table_names() == ["a", "b"]

    def test_reset(self, registry, state):
        parse_statement("CREATE TABLE t (a INT)", state, registry)
        registry.reset()
        state.reset()
        assert len(registry) == 0
        assert state.as_dict() == {"processedStatements": 0, "insideTransaction": False,
                                   "currentTable": None}
