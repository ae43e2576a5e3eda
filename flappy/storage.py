# flappy/storage.py
# Armazenamento do recorde (melhor pontuação).
# Funciona como o localStorage do navegador: chave -> inteiro, gravado num
# arquivo JSON. Arquivo ausente ou corrompido = chave ausente (vira 0 no jogo).

import json
import os

HIGHSCORE_PATH = os.path.join(os.path.dirname(__file__), "..", "highscore.json")


def parse_int(value):
    # aceita 12, "12" e "12.0"; bool não conta como número
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


class HighScoreStore:
    """Chave/valor de inteiros persistido em um arquivo JSON."""
    def __init__(self, path=HIGHSCORE_PATH):
        self.path = path

    def _read(self):
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            print(f"Aviso: falha ao ler {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key):
        """Retorna o inteiro salvo em `key` ou None se ausente/inválido."""
        return parse_int(self._read().get(key))

    def set(self, key, value):
        data = self._read()
        data[key] = int(value)
        try:
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
        except OSError as e:
            print(f"Aviso: falha ao salvar {self.path}: {e}")

