import pytest

from cloudflare_ddns.records import DnsRecord
from cloudflare_ddns.exceptions import DnsProviderError


def test_from_api_defaults():
    record = DnsRecord.from_api({"id": "abc123"})

    assert record.record_type == ""
    assert record.content == ""
    assert record.locked is False
    assert record.tags == []
    assert record.extra == {}


def test_to_api_keeps_unknown_keys():
    data = {
        "id": "abc123",
        "type": "A",
        "name": "home.example.com",
        "content": "1.2.3.4",
        "proxied": True,
        "proxiable": True,
        "ttl": 1,
        "locked": False,
        "tags": [],
        "modified_on": "2025-09-05T00:50:37Z",
        "comment": "router",
        "settings": {"flatten_cname": False},
    }

    assert DnsRecord.from_api(data).to_api() == data


@pytest.mark.parametrize("data", [{}, {"id": ""}, ["not", "a", "record"]])
def test_from_api_requires_id(data):
    with pytest.raises(DnsProviderError):
        DnsRecord.from_api(data)
