"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from typing import Dict

import pytest

from grana.config import GranaConfig, reload_config
from grana.config.logging_config import reset_logging
from grana.models import OvertimeRecord, PortfolioPosition, RentabilityRow


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'false',
        'LOG_LEVEL': 'DEBUG',
        'LOG_FORMAT': 'standard',
        'CURRENCY': 'BRL',
        'TIMEZONE': 'America/Sao_Paulo',
        'MAX_PROJECTION_MONTHS': '1200',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import grana.config.settings
    grana.config.settings._config = None

    yield test_env_vars

    # Clean up
    grana.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> GranaConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def night_shift_record() -> OvertimeRecord:
    """A 22:00-06:00 shift paid at 20/h with +50%."""
    return OvertimeRecord(
        id=1,
        user_id='user-1',
        start_time=dt.datetime(2024, 3, 1, 22, 0),
        end_time=dt.datetime(2024, 3, 2, 6, 0),
        hourly_rate=20.0,
        overtime_percentage=0.5,
        payment_date=dt.date(2024, 4, 5),
        total_value=288.0,
    )


@pytest.fixture
def day_shift_record() -> OvertimeRecord:
    """An 18:00-20:00 shift paid at 30/h with +75%."""
    return OvertimeRecord(
        id=2,
        user_id='user-1',
        start_time=dt.datetime(2024, 3, 10, 18, 0),
        end_time=dt.datetime(2024, 3, 10, 20, 0),
        hourly_rate=30.0,
        overtime_percentage=0.75,
        payment_date=dt.date(2024, 4, 5),
        total_value=105.0,
    )


@pytest.fixture
def sample_positions():
    """Sample portfolio positions, as exported from the carteira table."""
    return [
        PortfolioPosition(ativo_symbol='PETR4', quantidade='100', preco_medio='30,00'),
        PortfolioPosition(ativo_symbol='AAPL', quantidade='10', preco_medio='150', moeda='USD'),
    ]


@pytest.fixture
def sample_rentability():
    """Sample rentability rows with the latest quotes."""
    return [
        RentabilityRow(ativo_symbol='PETR4.SA', ultimo_preco='33,00', variacao_diaria='2'),
    ]


@pytest.fixture
def overtime_csv(tmp_path):
    """CSV export of the overtime_hours table, one row invalid."""
    path = tmp_path / 'overtime_hours.csv'
    path.write_text(
        'id,user_id,start_time,end_time,hourly_rate,overtime_percentage,payment_date,total_value\n'
        '1,user-1,2024-03-01T22:00:00,2024-03-02T06:00:00,20,0.5,2024-04-05,288.00\n'
        '2,user-1,2024-03-10T18:00:00,2024-03-10T20:00:00,"30,00",0.75,2024-04-05,105.00\n'
        '3,user-1,2024-05-02T18:00:00,2024-05-02T19:00:00,abc,0.75,2024-06-05,10.00\n',
        encoding='utf-8',
    )
    return path


@pytest.fixture
def positions_csv(tmp_path):
    """CSV export of the carteira table."""
    path = tmp_path / 'carteira.csv'
    path.write_text(
        'ativo_symbol,quantidade,preco_medio,tipo,moeda\n'
        'PETR4,100,"30,00",acao,BRL\n'
        'AAPL,10,150,acao,USD\n',
        encoding='utf-8',
    )
    return path


@pytest.fixture
def rentability_csv(tmp_path):
    """CSV export of the rentability view."""
    path = tmp_path / 'rentabilidade.csv'
    path.write_text(
        'ativo_symbol,ultimo_preco,lucro_total,rentabilidade_percentual,variacao_diaria,moeda\n'
        'PETR4.SA,33,,,2,BRL\n',
        encoding='utf-8',
    )
    return path


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by CLI runs so they never outlive a test."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add integration marker for tests in tests/integration/
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
