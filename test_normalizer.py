# test_normalizer.py - Strapi record normalization

from ra_strapi.normalizer import normalize_attributes, normalize_record, normalize_sequence


def test_normalize_record_maps_identifiers():
    """documentId becomes id, the numeric id is kept as ref"""
    record = {"documentId": "d1", "id": 1, "title": "A"}

    assert normalize_record(record) == {"id": "d1", "ref": 1, "title": "A"}


def test_normalize_record_drops_blocks():
    record = {"documentId": "d1", "id": 1, "blocks": [{"__component": "shared.rich-text"}], "title": "A"}

    normalized = normalize_record(record)

    assert "blocks" not in normalized
    assert normalized == {"id": "d1", "ref": 1, "title": "A"}


def test_normalize_record_nested_relations():
    """Single relations and lists of relations are normalized recursively"""
    record = {
        "documentId": "a1",
        "id": 3,
        "title": "Post",
        "author": {
            "documentId": "u1",
            "id": 7,
            "name": "Jane",
            "avatar": {"documentId": "m1", "id": 11, "url": "/a.png"},
        },
        "tags": [
            {"documentId": "t1", "id": 1, "label": "news"},
            {"documentId": "t2", "id": 2, "label": "tech"},
        ],
    }

    assert normalize_record(record) == {
        "id": "a1",
        "ref": 3,
        "title": "Post",
        "author": {
            "id": "u1",
            "ref": 7,
            "name": "Jane",
            "avatar": {"id": "m1", "ref": 11, "url": "/a.png"},
        },
        "tags": [
            {"id": "t1", "ref": 1, "label": "news"},
            {"id": "t2", "ref": 2, "label": "tech"},
        ],
    }


def test_normalize_attributes_skips_falsy_values():
    attributes = {"author": None, "views": 0, "title": "", "tags": [], "draft": False}

    assert normalize_attributes(attributes) == {
        "author": None,
        "views": 0,
        "title": "",
        "tags": [],
        "draft": False,
    }


def test_normalize_attributes_is_identity_on_flat_data():
    attributes = {"title": "A", "views": 10, "seo": {"metaTitle": "A"}, "labels": ["x", "y"]}
    expected = {"title": "A", "views": 10, "seo": {"metaTitle": "A"}, "labels": ["x", "y"]}

    result = normalize_attributes(attributes)

    assert result is attributes
    assert result == expected


def test_normalize_attributes_does_not_walk_plain_objects():
    """Only values carrying a documentId are recursed into"""
    attributes = {"seo": {"image": {"documentId": "m1", "id": 1}}}

    assert normalize_attributes(attributes) == {"seo": {"image": {"documentId": "m1", "id": 1}}}


def test_normalize_attributes_is_idempotent():
    normalized = normalize_record({
        "documentId": "a1",
        "id": 3,
        "author": {"documentId": "u1", "id": 7},
    })
    expected = {"id": "a1", "ref": 3, "author": {"id": "u1", "ref": 7}}

    assert normalize_attributes(dict(normalized)) == expected


def test_normalize_sequence():
    records = [
        {"documentId": "d1", "id": 1, "title": "A"},
        {"title": "component without documentId"},
    ]

    assert normalize_sequence(records) == [
        {"id": "d1", "ref": 1, "title": "A"},
        {"title": "component without documentId"},
    ]


def test_normalize_sequence_empty():
    assert normalize_sequence([]) == []
