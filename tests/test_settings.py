import pytest
from pydantic import ValidationError

from plantcare_social.shared.config.settings import Settings


class TestSettings:

    def test_single_worker_is_the_default(self):
        assert Settings().WORKERS == 1

    @pytest.mark.parametrize("workers", [0, 2, 4])
    def test_multiple_workers_are_rejected(self, workers):
        with pytest.raises(ValidationError) as error:
            Settings(WORKERS=workers)
        assert "WORKERS must be 1" in str(error.value)

    def test_environment_is_normalised(self):
        assert Settings(ENVIRONMENT="Production").ENVIRONMENT == "production"
