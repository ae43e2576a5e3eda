# flappy/bird.py
# Pássaro controlado pelo jogador.
# - x fica fixo desde o spawn; só y e a velocidade vertical mudam
# - a física é por frame (gravidade e pulo em unidades/frame), sem dt
# - o quadro da animação avança 0.3 por frame e cicla entre 3 quadros
#
# Ajuste os parâmetros de TUNING no topo deste arquivo para calibrar a sensação.

import pygame

from flappy.images import bird_sheet, BIRD_FRAMES

# ---------- PARÂMETROS DE TUNING ----------
BIRD_WIDTH = 34                 # proporção 408/228 = 17/12
BIRD_HEIGHT = 24
GRAVITY = 0.4                   # unidades/frame²
JUMP_VELOCITY = -6.0            # unidades/frame (substitui a velocidade atual)
ANIMATION_STEP = 0.3            # avanço do índice de animação por frame
ANIMATION_CYCLE = 9             # índice módulo 9, agrupado de 3 em 3
# -----------------------------------------


class Bird(pygame.sprite.Sprite):
    def __init__(self, pos=(45.0, 320.0)):
        super().__init__()
        self.width = BIRD_WIDTH
        self.height = BIRD_HEIGHT

        # pos float para movimento suave; rect é só para desenhar
        self.pos = pygame.math.Vector2(pos)
        self.velocity = 0.0
        self.anim_index = 0.0

        self.sheet = bird_sheet((self.width, self.height))
        self.image = self._frame_image()
        self.rect = self.image.get_rect(topleft=(int(self.pos.x), int(self.pos.y)))

    @property
    def x(self):
        return self.pos.x

    @property
    def y(self):
        return self.pos.y

    @property
    def frame(self):
        """Quadro atual da animação (0..2)."""
        return int((self.anim_index % ANIMATION_CYCLE) // (ANIMATION_CYCLE // BIRD_FRAMES))

    def jump(self):
        # sobrescreve (não soma) a velocidade atual
        self.velocity = JUMP_VELOCITY

    def update(self, *args):
        """
        Chamado uma vez por frame de simulação.
        Aplica gravidade e integra y, limitando ao topo da tela (y >= 0).
        O limite NÃO zera a velocidade: no teto ela continua acumulando.
        """
        self.velocity += GRAVITY
        self.pos.y = max(self.pos.y + self.velocity, 0)
        self.anim_index += ANIMATION_STEP

        self.image = self._frame_image()
        self.rect.x = int(self.pos.x)
        self.rect.y = int(self.pos.y)

    def _frame_image(self):
        frame_h = self.sheet.get_height() // BIRD_FRAMES
        area = pygame.Rect(0, self.frame * frame_h, self.sheet.get_width(), frame_h)
        return self.sheet.subsurface(area)
