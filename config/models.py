"""
Централизованная конфигурация моделей для AI-репетитора
"""

# Основная модель (небольшая и быстрая, без рассуждений)
DEFAULT_MODEL = "qwen2.5-7b-instruct"

# Конфигурации для разных режимов
MODEL_CONFIGS = {
    "production": {
        "model_name": DEFAULT_MODEL,
        "temperature": 0.3,
        "max_tokens": 600,
    },
    "fast": {
        "model_name": "qwen2.5-1.5b-instruct",
        "temperature": 0.3,
        "max_tokens": 400,
    },
    "debug": {
        "model_name": DEFAULT_MODEL,
        "temperature": 0.0,
        "max_tokens": 200,
    }
}

def get_model_name(config_type: str = "production") -> str:
    """Получить имя модели для конфигурации"""
    return MODEL_CONFIGS.get(config_type, MODEL_CONFIGS["production"])["model_name"]

def get_model_config(config_type: str = "production") -> dict:
    """Получить полную конфигурацию модели"""
    return MODEL_CONFIGS.get(config_type, MODEL_CONFIGS["production"])
