import os


os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("CEP_LOOKUP_TIMEOUT", "1.0")
os.environ.setdefault("BRASILAPI_URL_TEMPLATE", "https://brasilapi.test/api/cep/v1/{cep}")
os.environ.setdefault("VIACEP_URL_TEMPLATE", "http://viacep.test/ws/{cep}/json/")
