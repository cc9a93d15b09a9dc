"""Tests for provider authorization URLs and profile normalization.

Normalization is pure, so these tests need no HTTP mocking.
"""
from urllib.parse import parse_qs, urlsplit

import pytest

from multi_oauth import (
    PROVIDER_REGISTRY,
    AppleOAuthProvider,
    FacebookOAuthProvider,
    GitHubOAuthProvider,
    GoogleOAuthProvider,
    LinkedInOAuthProvider,
    MicrosoftOAuthProvider,
    OAuthUserInfoError,
    ProviderConfig,
    ProviderName,
    TwitterOAuthProvider,
)
from multi_oauth.pkce import compute_code_challenge


def _query(url: str) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}


def _base(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


# ========== Registry Tests ==========

def test_registry_covers_every_provider_name():
    """Every ProviderName maps to a provider class reporting that name."""
    assert set(PROVIDER_REGISTRY) == set(ProviderName)
    config = ProviderConfig(client_id="c", client_secret="s")
    for name, provider_cls in PROVIDER_REGISTRY.items():
        assert provider_cls(config, "https://host/cb").name == name.value


# ========== Authorization URL Tests ==========

@pytest.mark.parametrize("provider_cls", list(PROVIDER_REGISTRY.values()))
def test_authorization_url_contains_standard_params(provider_cls, provider_config, redirect_uri):
    """All providers include client_id, redirect_uri, response_type, scope and state."""
    provider = provider_cls(provider_config, redirect_uri)

    url = provider.get_authorization_url(state="xyz")
    params = _query(url)

    assert _base(url) == provider.authorization_url
    assert params["client_id"] == "client-123"
    assert params["redirect_uri"] == redirect_uri
    assert params["response_type"] == "code"
    assert params["scope"] == " ".join(provider.default_scopes)
    assert params["state"] == "xyz"


def test_authorization_url_omits_state_when_not_given(provider_config, redirect_uri):
    provider = GoogleOAuthProvider(provider_config, redirect_uri)

    params = _query(provider.get_authorization_url())

    assert "state" not in params
    assert "code_challenge" not in params


def test_custom_scope_overrides_defaults(redirect_uri):
    config = ProviderConfig(client_id="c", client_secret="s", scope=["openid", "email"])
    provider = GoogleOAuthProvider(config, redirect_uri)

    assert _query(provider.get_authorization_url())["scope"] == "openid email"


def test_provider_redirect_uri_overrides_global():
    config = ProviderConfig(client_id="c", client_secret="s", redirect_uri="https://other/cb")
    provider = GitHubOAuthProvider(config, "https://host/cb")

    assert provider.redirect_uri == "https://other/cb"
    assert _query(provider.get_authorization_url())["redirect_uri"] == "https://other/cb"


def test_camel_case_config_keys_are_accepted():
    config = ProviderConfig.model_validate(
        {"clientId": "c", "clientSecret": "s", "redirectUri": "https://x/cb"}
    )
    assert config.client_id == "c"
    assert config.redirect_uri == "https://x/cb"


def test_pkce_challenge_added_when_verifier_given(provider_config, redirect_uri):
    provider = GoogleOAuthProvider(provider_config, redirect_uri)

    params = _query(provider.get_authorization_url(state="s", code_verifier="v" * 50))

    assert params["code_challenge"] == compute_code_challenge("v" * 50)
    assert params["code_challenge_method"] == "S256"


def test_twitter_authorization_url_has_plain_pkce_by_default(provider_config, redirect_uri):
    provider = TwitterOAuthProvider(provider_config, redirect_uri)

    params = _query(provider.get_authorization_url(state="s"))

    assert params["code_challenge"] == "challenge"
    assert params["code_challenge_method"] == "plain"
    assert params["scope"] == "tweet.read users.read"


def test_twitter_authorization_url_uses_s256_with_verifier(provider_config, redirect_uri):
    provider = TwitterOAuthProvider(provider_config, redirect_uri)

    params = _query(provider.get_authorization_url(code_verifier="my-verifier"))

    assert params["code_challenge"] == compute_code_challenge("my-verifier")
    assert params["code_challenge_method"] == "S256"


def test_apple_authorization_url_requests_form_post(provider_config, redirect_uri):
    provider = AppleOAuthProvider(provider_config, redirect_uri)

    params = _query(provider.get_authorization_url(state="s"))

    assert params["response_mode"] == "form_post"
    assert params["scope"] == "name email"
    assert provider.user_info_url == ""


# ========== Normalization Tests ==========

def test_google_extract_user_data(provider_config, redirect_uri):
    profile = {
        "id": "1234",
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "picture": "https://img/ada.png",
    }
    user = GoogleOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.id == "1234"
    assert user.name == "Ada Lovelace"
    assert user.email == "ada@example.com"
    assert user.avatar == "https://img/ada.png"
    assert user.provider == "google"
    assert user.raw == profile


def test_facebook_extract_user_data_reads_nested_picture(provider_config, redirect_uri):
    profile = {
        "id": "fb1",
        "name": "Grace",
        "email": "grace@example.com",
        "picture": {"data": {"url": "https://fb/pic.jpg"}},
    }
    user = FacebookOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.avatar == "https://fb/pic.jpg"
    assert user.provider == "facebook"


def test_facebook_extract_user_data_without_picture(provider_config, redirect_uri):
    user = FacebookOAuthProvider(provider_config, redirect_uri).extract_user_data(
        {"id": "fb1", "name": "Grace"}
    )

    assert user.avatar is None
    assert user.email is None


def test_github_name_falls_back_to_login_and_id_is_string(provider_config, redirect_uri):
    profile = {"id": 42, "login": "octocat", "name": None, "avatar_url": "https://gh/a.png"}
    user = GitHubOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.id == "42"
    assert user.name == "octocat"
    assert user.email is None
    assert user.avatar == "https://gh/a.png"


def test_twitter_extract_user_data_reads_data_envelope(provider_config, redirect_uri):
    profile = {
        "data": {
            "id": "tw1",
            "name": "Jack",
            "username": "jack",
            "profile_image_url": "https://tw/jack.png",
        }
    }
    user = TwitterOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.id == "tw1"
    assert user.name == "Jack"
    assert user.email is None
    assert user.avatar == "https://tw/jack.png"
    assert user.raw == profile


def test_linkedin_extract_user_data_uses_sub(provider_config, redirect_uri):
    profile = {"sub": "li-9", "name": "Linus", "email": "l@example.com", "picture": "https://li/p"}
    user = LinkedInOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.id == "li-9"
    assert user.avatar == "https://li/p"


def test_apple_name_falls_back_to_placeholder(provider_config, redirect_uri):
    user = AppleOAuthProvider(provider_config, redirect_uri).extract_user_data(
        {"sub": "apple-1", "email": "hidden@privaterelay.appleid.com"}
    )

    assert user.id == "apple-1"
    assert user.name == "Apple User"
    assert user.avatar is None


def test_microsoft_email_falls_back_to_principal_name(provider_config, redirect_uri):
    profile = {"id": "ms1", "displayName": "Bill", "mail": None, "userPrincipalName": "bill@corp.com"}
    user = MicrosoftOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.email == "bill@corp.com"
    assert user.name == "Bill"
    assert user.avatar is None


def test_microsoft_prefers_mail_over_principal_name(provider_config, redirect_uri):
    profile = {"id": "ms1", "displayName": "Bill", "mail": "b@corp.com", "userPrincipalName": "bill@corp.com"}
    user = MicrosoftOAuthProvider(provider_config, redirect_uri).extract_user_data(profile)

    assert user.email == "b@corp.com"


@pytest.mark.parametrize(
    "provider_cls, profile, expected_name",
    [
        (GoogleOAuthProvider, {"id": "1"}, "1"),
        (FacebookOAuthProvider, {"id": "fb-2"}, "fb-2"),
        (LinkedInOAuthProvider, {"sub": "li-3"}, "li-3"),
        (MicrosoftOAuthProvider, {"id": "ms-4", "userPrincipalName": "u@corp.com"}, "u@corp.com"),
        (MicrosoftOAuthProvider, {"id": "ms-5"}, "ms-5"),
        (TwitterOAuthProvider, {"data": {"id": "tw-6", "username": "handle"}}, "handle"),
        (TwitterOAuthProvider, {"data": {"id": "tw-7"}}, "tw-7"),
        (GitHubOAuthProvider, {"id": 8}, "8"),
    ],
)
def test_name_falls_back_when_display_name_missing(
    provider_cls, profile, expected_name, provider_config, redirect_uri
):
    """Missing display names fall back to the handle, then to the id."""
    user = provider_cls(provider_config, redirect_uri).extract_user_data(profile)

    assert user.name == expected_name
    assert user.id


def test_profile_without_id_is_rejected(provider_config, redirect_uri):
    with pytest.raises(OAuthUserInfoError, match="no user id"):
        GoogleOAuthProvider(provider_config, redirect_uri).extract_user_data({"name": "Nobody"})
