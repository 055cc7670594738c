from fastapi.testclient import TestClient
from propcheck.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_validate_clean_resource():
    files = {"file": ("Messages.properties", b"greeting=hello\nfarewell=bye\n", "text/plain")}
    r = client.post("/validate", files=files, params={"check_encoding": "true"})
    assert r.status_code == 200

    data = r.json()
    assert data["result"]["outcome"] == "pass"
    assert data["result"]["resource"] == "Messages.properties"
    assert data["entries"] == 2
    assert data["encoding_checked"] is True
    assert data["encoding"]["ascii"] is True

def test_validate_duplicate_key():
    files = {"file": ("Messages.properties", b"key1=a\nkey1=b\n", "text/plain")}
    r = client.post("/validate", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["result"]["outcome"] == "duplicate_key"
    assert "key1" in data["result"]["message"]
    assert data["entries"] is None

def test_validate_ambiguous_encoding():
    # "é" as UTF-8 is also two valid Latin-1 characters
    raw = "name=Montréal\n".encode("utf-8")

    files = {"file": ("Messages_fr.properties", raw, "text/plain")}
    r = client.post("/validate", files=files, params={"check_encoding": "true"})
    assert r.status_code == 200

    data = r.json()
    assert data["result"]["outcome"] == "encoding_ambiguity"
    assert data["encoding"]["ascii"] is False
    assert data["encoding"]["utf_8"] is True
    assert data["encoding"]["iso_8859_1"] is True

def test_validate_ambiguous_encoding_check_disabled():
    raw = "name=Montréal\n".encode("utf-8")

    files = {"file": ("Messages_fr.properties", raw, "text/plain")}
    r = client.post("/validate", files=files, params={"check_encoding": "false"})
    assert r.status_code == 200
    assert r.json()["result"]["outcome"] == "pass"

def test_rejects_other_extensions():
    files = {"file": ("data.csv", b"a,b\n", "text/csv")}
    r = client.post("/validate", files=files)
    assert r.status_code == 422

def test_validate_duplicate_lone_surrogate_key():
    files = {"file": ("Messages.properties", b"k\\ud800=1\nk\\ud800=2\n", "text/plain")}
    r = client.post("/validate", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["result"]["outcome"] == "duplicate_key"
    assert "k\\ud800" in data["result"]["message"]
