from chartkit.values import Value, Values


def _sample():
    return [
        Value(value=10, label="Blue"),
        Value(value=9, label="Green"),
        Value(value=8, label="Gray"),
        Value(value=7, label="Orange"),
        Value(value=6, label="HEANG"),
        Value(value=5, label="??"),
        Value(value=2, label="!!"),
    ]


def test_values():
    values = Values(_sample()).values()
    assert values == [10, 9, 8, 7, 6, 5, 2]


def test_values_normalized():
    values = Values(_sample()).values_normalized()
    assert len(values) == 7
    assert values[0] == 0.2127
    assert values[6] == 0.0425


def test_normalize():
    values = Values(_sample()).normalize()
    assert len(values) == 7
    assert values[0].value == 0.2127
    assert values[6].value == 0.0425
    assert values[0].label == "Blue"


def test_normalize_drops_non_positive():
    values = Values([Value(value=0, label="zero"), Value(value=5, label="five")]).normalize()
    assert [v.label for v in values] == ["five"]
    assert values[0].value == 1.0