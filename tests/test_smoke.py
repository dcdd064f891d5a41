from argument_delimiter import DelimiterConfiguration, RoleConflict, split


def test_smoke():
    config = DelimiterConfiguration()
    config.delimiters.add(" ")
    config.quote_pairs.add('"', '"')

    out = split('open "My Documents" now', config)
    assert isinstance(out, list)
    assert out == ["open", "My Documents", "now"]
    for item in out:
        assert isinstance(item, str)

    try:
        config.add_delimiter('"')
    except RoleConflict as e:
        assert e.char == '"'
    else:
        raise AssertionError("quote character accepted as delimiter")
