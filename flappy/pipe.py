# flappy/pipe.py
# Cano (obstáculo) que anda da direita para a esquerda.
# Canos nascem em pares (top + bottom) com a mesma altura sorteada.
# O campo `role` distingue o sprite ('top' ou 'bottom'); o comportamento é o mesmo.
#
# Ao contrário das balas, o cano não se remove sozinho: quem remove é a
# simulação, sempre pela cabeça da fila (os canos ficam ordenados por x).

import pygame

from flappy.images import pipe_image

PIPE_WIDTH = 64                 # proporção 384/3072 = 1/8
PIPE_HEIGHT = 512


class Pipe(pygame.sprite.Sprite):
    def __init__(self, pos=(360.0, 0.0), role="top"):
        """
        pos: tupla (x, y) do canto superior esquerdo
        role: 'top' ou 'bottom' (só muda a imagem desenhada)
        """
        super().__init__()
        self.role = role
        self.width = PIPE_WIDTH
        self.height = PIPE_HEIGHT
        self.passed = False

        self.image = pipe_image(role, (self.width, self.height))
        self.rect = self.image.get_rect(topleft=(int(pos[0]), int(pos[1])))
        # posição em float (y fica fixo depois do spawn)
        self.pos = pygame.math.Vector2(pos)

    @property
    def x(self):
        return self.pos.x

    @property
    def y(self):
        return self.pos.y

    @property
    def right(self):
        return self.pos.x + self.width

    def update(self, vx):
        """Move o cano vx unidades (por frame, sem dt)."""
        self.pos.x += vx
        self.rect.x = int(self.pos.x)

    def is_expired(self):
        # saiu totalmente pela esquerda
        return self.pos.x < -self.width
