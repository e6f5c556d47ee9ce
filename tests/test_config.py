"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

from config import Config
from models import FetchOptions

AWS_ENV = {
    'AWS_REGION': 'us-west-2',
    'AWS_DEFAULT_REGION': 'ap-southeast-1',
    'AWS_ACCESS_KEY_ID': 'AKIA_ENV',
    'AWS_SECRET_ACCESS_KEY': 'secret_env',
}


class TestConfig:
    """Tests for Config class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_empty(self):
        """Test Config.from_env treats missing variables as no default."""
        config = Config.from_env()
        assert config.aws_region is None
        assert config.aws_default_region is None
        assert config.aws_access_key_id is None
        assert config.aws_secret_access_key is None
        assert config.aws_session_token is None

    @patch.dict(os.environ, {**AWS_ENV, 'AWS_SESSION_TOKEN': 'token_env'}, clear=True)
    def test_from_env_all_variables(self):
        """Test Config.from_env with all variables set."""
        config = Config.from_env()
        assert config.aws_region == 'us-west-2'
        assert config.aws_default_region == 'ap-southeast-1'
        assert config.aws_access_key_id == 'AKIA_ENV'
        assert config.aws_secret_access_key == 'secret_env'
        assert config.aws_session_token == 'token_env'

    @patch.dict(os.environ, {'AWS_REGION': ''}, clear=True)
    def test_from_env_empty_string_is_absent(self):
        """Test empty environment values are treated as unset."""
        assert Config.from_env().aws_region is None


class TestResolve:
    """Tests for Config.resolve precedence."""

    def test_explicit_values_override_environment(self):
        """Test explicit options always win over the snapshot."""
        config = Config(
            aws_region='us-west-2',
            aws_default_region='ap-southeast-1',
            aws_access_key_id='AKIA_ENV',
            aws_secret_access_key='secret_env',
        )
        options = FetchOptions(
            body={},
            region='us-east-1',
            access_key_id='AKIA_PARAM',
            secret_access_key='secret_param',
        )

        resolved = config.resolve(options)

        assert resolved.region == 'us-east-1'
        assert resolved.access_key_id == 'AKIA_PARAM'
        assert resolved.secret_access_key == 'secret_param'

    def test_region_falls_back_to_aws_region(self):
        """Test AWS_REGION is used before AWS_DEFAULT_REGION."""
        config = Config(aws_region='eu-central-1', aws_default_region='ap-southeast-1')
        assert config.resolve(FetchOptions(body={})).region == 'eu-central-1'

    def test_region_falls_back_to_default_region(self):
        """Test AWS_DEFAULT_REGION is used when AWS_REGION is absent."""
        config = Config(aws_default_region='ap-southeast-1')
        assert config.resolve(FetchOptions(body={})).region == 'ap-southeast-1'

    def test_empty_explicit_region_falls_back(self):
        """Test an empty explicit region does not mask the environment."""
        config = Config(aws_region='eu-central-1')
        options = FetchOptions(body={}, region='')
        assert config.resolve(options).region == 'eu-central-1'

    def test_nothing_resolves_to_none(self):
        """Test absent values resolve to None without raising."""
        resolved = Config().resolve(FetchOptions(body={}))
        assert resolved.region is None
        assert resolved.access_key_id is None
        assert resolved.secret_access_key is None
        assert resolved.has_keys is False

    def test_credentials_fall_back_to_environment(self):
        """Test key pair comes from the snapshot when not passed."""
        config = Config(
            aws_access_key_id='AKIA_ENV',
            aws_secret_access_key='secret_env',
        )
        resolved = config.resolve(FetchOptions(body={}))
        assert resolved.access_key_id == 'AKIA_ENV'
        assert resolved.secret_access_key == 'secret_env'
        assert resolved.has_keys is True

    def test_env_session_token_used_with_env_keys(self):
        """Test session token is taken from env when keys are too."""
        config = Config(
            aws_access_key_id='AKIA_ENV',
            aws_secret_access_key='secret_env',
            aws_session_token='token_env',
        )
        assert config.resolve(FetchOptions(body={})).session_token == 'token_env'

    def test_env_session_token_ignored_with_explicit_keys(self):
        """Test explicit keys are not paired with an env session token."""
        config = Config(aws_session_token='token_env')
        options = FetchOptions(
            body={},
            access_key_id='AKIA_PARAM',
            secret_access_key='secret_param',
        )
        assert config.resolve(options).session_token is None
