from certifica.services.verification_service import (
    VERIFICATION_ALPHABET,
    CODE_LENGTH,
    generate_verification_code,
    normalize_code,
    build_verification_url,
    strip_verify_param,
)


def test_alphabet_has_32_unambiguous_characters():
    assert len(VERIFICATION_ALPHABET) == 32
    assert len(set(VERIFICATION_ALPHABET)) == 32
    for confusable in "0O1I":
        assert confusable not in VERIFICATION_ALPHABET


def test_generated_codes_use_restricted_alphabet():
    for _ in range(500):
        code = generate_verification_code()
        assert len(code) == CODE_LENGTH == 8
        assert set(code) <= set(VERIFICATION_ALPHABET)


def test_generated_codes_vary():
    codes = {generate_verification_code() for _ in range(50)}
    assert len(codes) > 1


def test_normalize_code():
    assert normalize_code("  ab3cd4ef ") == "AB3CD4EF"
    assert normalize_code("") is None
    assert normalize_code("   ") is None
    assert normalize_code(None) is None


def test_build_verification_url():
    url = build_verification_url("ABCD2345", "https://escola.example.com/verificar")
    assert url == "https://escola.example.com/verificar?verify=ABCD2345"


def test_build_verification_url_keeps_existing_query():
    url = build_verification_url("ABCD2345", "https://escola.example.com/?page=verificar")
    assert url == "https://escola.example.com/?page=verificar&verify=ABCD2345"


def test_strip_verify_param():
    assert strip_verify_param("https://x.example.com/verificar?verify=ABC") == "https://x.example.com/verificar"
    assert (
        strip_verify_param("https://x.example.com/verificar?verify=ABC&lang=pt")
        == "https://x.example.com/verificar?lang=pt"
    )
