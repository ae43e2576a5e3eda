# flappy/images.py
# Carregamento das imagens opcionais (assets/images/) com fallback procedural.
# Se o arquivo não existir ou falhar ao carregar, desenhamos um placeholder
# para que o jogo rode mesmo sem nenhum asset.

import os
import pygame

ASSETS_IMAGES = os.path.join(os.path.dirname(__file__), "..", "assets", "images")
BIRD_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "bird.png")
TOP_PIPE_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "toppipe.png")
BOTTOM_PIPE_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "bottompipe.png")

BIRD_FRAMES = 3

# cache por (caminho, tamanho) para não recarregar a cada par de canos
_cache = {}


def load_image(path, size, placeholder):
    """
    Retorna uma Surface do tamanho pedido.
    path: caminho da imagem (pode não existir)
    size: (w, h) final
    placeholder: função (size) -> Surface usada quando a imagem não está disponível
    """
    key = (path, tuple(size))
    if key in _cache:
        return _cache[key]

    img = None
    if os.path.isfile(path):
        try:
            img = pygame.image.load(path)
            # convert_alpha só funciona com display inicializado (testes rodam sem janela)
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                img = img.convert_alpha()
            img = pygame.transform.smoothscale(img, size)
        except (pygame.error, ValueError) as e:
            print(f"Aviso: falha ao carregar {path}: {e}")
            img = None

    if img is None:
        img = placeholder(size)

    _cache[key] = img
    return img


def clear_cache():
    _cache.clear()


# ----------------- placeholders -----------------
def bird_placeholder(size):
    """Três quadros empilhados verticalmente (asa para cima, meio, para baixo)."""
    w, h = size
    sheet = pygame.Surface((w, h * BIRD_FRAMES), pygame.SRCALPHA)
    for frame in range(BIRD_FRAMES):
        top = frame * h
        pygame.draw.ellipse(sheet, (250, 210, 40), (0, top, w, h))
        pygame.draw.circle(sheet, (255, 255, 255), (int(w * 0.72), top + int(h * 0.35)), max(2, h // 6))
        pygame.draw.circle(sheet, (20, 20, 20), (int(w * 0.76), top + int(h * 0.35)), max(1, h // 12))
        pygame.draw.polygon(sheet, (240, 120, 30),
                            [(w - 2, top + h // 2), (int(w * 0.8), top + int(h * 0.45)),
                             (int(w * 0.8), top + int(h * 0.65))])
        # asa muda de posição em cada quadro
        wing_y = top + int(h * (0.3 + 0.2 * frame))
        pygame.draw.ellipse(sheet, (230, 180, 30), (int(w * 0.15), wing_y, int(w * 0.4), max(2, h // 3)))
    return sheet


def pipe_placeholder(size, mouth_at_bottom):
    w, h = size
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, (90, 190, 70), (4, 0, w - 8, h))
    pygame.draw.rect(surf, (50, 130, 40), (4, 0, w - 8, h), 2)
    mouth_h = 24
    mouth_y = h - mouth_h if mouth_at_bottom else 0
    pygame.draw.rect(surf, (100, 210, 80), (0, mouth_y, w, mouth_h))
    pygame.draw.rect(surf, (50, 130, 40), (0, mouth_y, w, mouth_h), 2)
    return surf


def bird_sheet(size):
    w, h = size
    return load_image(BIRD_IMAGE_PATH, (w, h * BIRD_FRAMES), lambda s: bird_placeholder((w, h)))


def pipe_image(role, size):
    if role == "top":
        return load_image(TOP_PIPE_IMAGE_PATH, size, lambda s: pipe_placeholder(s, mouth_at_bottom=True))
    return load_image(BOTTOM_PIPE_IMAGE_PATH, size, lambda s: pipe_placeholder(s, mouth_at_bottom=False))
