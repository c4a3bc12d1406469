import pytest

from otpcore import HOTP, TOTP, HashAlgorithm, build_uri, parse_uri

SECRET = "CH4772YYRSD7O5E7KQRZMHNRRRLSASCW"


def test_totp_provisioning_uri():
    totp = TOTP(SECRET, name="example@example.com", issuer="AppName")
    assert totp.provisioning_uri() == (
        "otpauth://totp/AppName:example%40example.com"
        "?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&issuer=AppName&algorithm=SHA1&digits=6&period=30"
    )


def test_hotp_provisioning_uri():
    hotp = HOTP(SECRET, name="alice", initial_count=0, digits=8, algorithm="sha256")
    assert hotp.provisioning_uri() == (
        "otpauth://hotp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&counter=0&algorithm=SHA256&digits=8"
    )


def test_build_uri_spaces_and_image():
    uri = build_uri(SECRET, "alice smith", issuer="Foo Corp", image="https://example.com/logo.png")
    assert uri.startswith("otpauth://totp/Foo%20Corp:alice%20smith?")
    assert "issuer=Foo%20Corp" in uri
    assert "image=https%3A%2F%2Fexample.com%2Flogo.png" in uri


def test_build_uri_rejects_bad_image():
    with pytest.raises(ValueError):
        build_uri(SECRET, "alice", image="http://example.com/logo.png")


def test_parse_totp_uri():
    otp = parse_uri(
        "otpauth://totp/AppName:example%40example.com"
        "?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&issuer=AppName&algorithm=SHA256&digits=8&period=60"
    )
    assert isinstance(otp, TOTP)
    assert otp.secret == SECRET
    assert otp.name == "example@example.com"
    assert otp.issuer == "AppName"
    assert otp.algorithm is HashAlgorithm.SHA256
    assert otp.digits == 8
    assert otp.interval == 60


def test_parse_hotp_uri():
    otp = parse_uri("otpauth://hotp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&counter=5")
    assert isinstance(otp, HOTP)
    assert otp.initial_count == 5


def test_provisioning_uri_round_trip():
    totp = TOTP(SECRET, name="bob", issuer="Acme", digits=7, interval=45)
    parsed = parse_uri(totp.provisioning_uri())
    assert parsed.at(1700000000) == totp.at(1700000000)


@pytest.mark.parametrize(
    "uri",
    [
        "http://totp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW",
        "otpauth://totp/alice?digits=6",
        "otpauth://motp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW",
        "otpauth://totp/Foo:alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&issuer=Bar",
        "otpauth://totp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&digits=9",
        "otpauth://totp/alice?secret=CH4772YYRSD7O5E7KQRZMHNRRRLSASCW&algorithm=MD5",
    ],
)
def test_parse_uri_rejects(uri):
    with pytest.raises(ValueError):
        parse_uri(uri)
