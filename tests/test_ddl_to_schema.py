"""
CREATE TABLE parsing tests.
"""
from sql2json.ddl_to_schema import (columns_block, extract_table_name, parse_column_definition,
                                    parse_create_table, split_top_level_commas)

MYSQL_DDL = """CREATE TABLE `SERVMASK_PREFIX_users` (
  `id` int(11) NOT NULL AUTO_INCREMENT,
  `price` decimal(10,2) DEFAULT NULL,
  `name` varchar(255) NOT NULL,
  PRIMARY KEY (`id`),
  UNIQUE KEY `name` (`name`),
  KEY `idx_price` (`price`),
  FOREIGN KEY (`id`) REFERENCES `other` (`id`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;"""


class TestParseCreateTable:

    def test_nested_parens_do_not_split_columns(self):
        table = parse_create_table("CREATE TABLE t (a INT, b VARCHAR(10))")
        assert table == {
            "tableName": "t",
            "columns": [{"name": "a", "type": "INT"}, {"name": "b", "type": "VARCHAR(10)"}],
            "data": [],
        }

    def test_mysql_dump_table(self):
        table = parse_create_table(MYSQL_DDL)
        assert table["tableName"] == "users"
        assert table["columns"] == [
            {"name": "id", "type": "int(11) NOT NULL AUTO_INCREMENT"},
            {"name": "price", "type": "decimal(10,2) DEFAULT NULL"},
            {"name": "name", "type": "varchar(255) NOT NULL"},
        ]
        assert table["data"] == []

    def test_lowercase_keywords_and_no_space_before_paren(self):
        table = parse_create_table("create table items(id int, label text)")
        assert table["tableName"] == "items"
        assert [c["name"] for c in table["columns"]] == ["id", "label"]

    def test_if_not_exists(self):
        table = parse_create_table("CREATE TABLE IF NOT EXISTS `logs` (`id` INT)")
        assert table["tableName"] == "logs"
        assert table["columns"] == [{"name": "id", "type": "INT"}]

    def test_missing_open_paren(self):
        assert parse_create_table("CREATE TABLE t") is None

    def test_missing_close_paren(self):
        assert parse_create_table("CREATE TABLE t (a INT") is None

    def test_comma_inside_comment_string(self):
        table = parse_create_table("CREATE TABLE t (a INT COMMENT 'x, y', b INT)")
        assert table["columns"] == [
            {"name": "a", "type": "INT COMMENT 'x, y'"},
            {"name": "b", "type": "INT"},
        ]

    def test_quoted_column_name_with_space(self):
        table = parse_create_table("CREATE TABLE t (`first name` VARCHAR(10), \"last name\" TEXT, `id` INT)")
        assert table["columns"] == [
            {"name": "first name", "type": "VARCHAR(10)"},
            {"name": "last name", "type": "TEXT"},
            {"name": "id", "type": "INT"},
        ]

    def test_table_constraints_are_not_columns(self):
        sql = """CREATE TABLE `orders` (
  `id` int NOT NULL,
  `user_id` int NOT NULL,
  `key_name` varchar(20),
  `body` text,
  PRIMARY KEY (`id`),
  INDEX `idx_user` (`user_id`),
  FULLTEXT KEY `ft_body` (`body`),
  CONSTRAINT `fk_user` FOREIGN KEY (`user_id`) REFERENCES `users` (`id`),
  CHECK (`id` > 0)
) ENGINE=InnoDB;"""
        table = parse_create_table(sql)
        assert [c["name"] for c in table["columns"]] == ["id", "user_id", "key_name", "body"]

    def test_error_reported_unless_suppressed(self, capsys):
        assert parse_create_table(None) is None
        assert "Error parsing CREATE TABLE" in capsys.readouterr().err

        assert parse_create_table(None, skip_unparsable=True) is None
        assert capsys.readouterr().err == ""


class TestHelpers:

    def test_extract_table_name_strips_prefix(self):
        assert extract_table_name("CREATE TABLE SERVMASK_PREFIX_posts (id INT)") == "posts"

    def test_columns_block_uses_first_and_last_paren(self):
        assert columns_block("CREATE TABLE t (a DECIMAL(4,1)) X") == "a DECIMAL(4,1)"
        assert columns_block("CREATE TABLE t") is None

    def test_split_top_level_commas(self):
        assert split_top_level_commas("a INT, b DECIMAL(10,2), , c TEXT") == [
            "a INT", "b DECIMAL(10,2)", "c TEXT"]

    def test_split_handles_escaped_quote(self):
        assert split_top_level_commas(r"a TEXT DEFAULT 'it\'s, ok', b INT") == [
            r"a TEXT DEFAULT 'it\'s, ok'", "b INT"]

    def test_skipped_definitions(self):
        for line in ("PRIMARY KEY (`id`)", "primary key (id)", "KEY `k` (`a`)",
                     "UNIQUE KEY `u` (`a`)", "FOREIGN KEY (a) REFERENCES b(a)",
                     ") ENGINE=InnoDB", "-- comment", ""):
            assert parse_column_definition(line) is None

    def test_single_word_definition_is_not_a_column(self):
        assert parse_column_definition("id") is None

    def test_trailing_comma_stripped_from_type(self):
        assert parse_column_definition("`a` INT NOT NULL,") == {"name": "a", "type": "INT NOT NULL"}
