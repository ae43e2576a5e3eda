# flappy/simulation.py
# Estado do jogo e o passo de simulação, sem janela nem relógio.
# O Game (flappy/game.py) é quem chama step() a cada frame e spawn_pipes()
# a cada tick do timer de canos; aqui só ficam as regras.
#
import enum
import math
import random
from collections import deque, namedtuple

from flappy.bird import Bird
from flappy.pipe import Pipe, PIPE_HEIGHT

# ----------------- Configurações -----------------
BOARD_WIDTH = 360
BOARD_HEIGHT = 640

PIPE_VELOCITY_X = -2            # canos andam para a esquerda (unidades/frame)
OPENING_SPACE = BOARD_HEIGHT / 4
SCORE_PER_PIPE = 0.5            # cada par vale 1.0 (0.5 por cano)
PIPE_SPAWN_INTERVAL_MS = 1500

HIGHSCORE_KEY = "highestScore"


class GameState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


# snapshot do frame para quem desenha
RenderState = namedtuple(
    "RenderState",
    ["bird_rect", "bird_frame", "pipes", "score", "highest_score", "state"],
)


def detect_collision(a, b):
    """
    Teste AABB entre dois retângulos com x, y, width, height (float).
    Desigualdades estritas: encostar a borda não é colisão.
    """
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


class Simulation:
    def __init__(self, store, rng=None):
        """
        store: objeto com get(key) / set(key, int) para o recorde
        rng: random.Random usado no sorteio da altura dos canos
        """
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.NOT_STARTED
        self.reset()

    # ----------------- reset / start -----------------
    def reset(self):
        self.bird = Bird(pos=(BOARD_WIDTH / 8, BOARD_HEIGHT / 2))
        self.pipes = deque()
        self.velocity_x = PIPE_VELOCITY_X
        self.score = 0.0
        self.highest_score = self.load_highest_score()

    def start(self):
        self.reset()
        self.state = GameState.RUNNING

    def load_highest_score(self):
        value = self.store.get(HIGHSCORE_KEY)
        return value if value is not None else 0

    @property
    def display_score(self):
        return math.floor(self.score)

    # ----------------- input -----------------
    def jump(self):
        # fora do jogo o pulo é ignorado
        if self.state != GameState.RUNNING:
            return
        self.bird.jump()

    # ----------------- spawn -----------------
    def spawn_pipes(self):
        if self.state != GameState.RUNNING:
            return
        random_y = -PIPE_HEIGHT / 4 - self.rng.random() * (PIPE_HEIGHT / 2)
        self.place_pipe_pair(random_y)

    def place_pipe_pair(self, random_y):
        top = Pipe(pos=(BOARD_WIDTH, random_y), role="top")
        bottom = Pipe(pos=(BOARD_WIDTH, random_y + PIPE_HEIGHT + OPENING_SPACE), role="bottom")
        self.pipes.append(top)
        self.pipes.append(bottom)
        return top, bottom

    # ----------------- update -----------------
    def step(self):
        """Avança um frame. Fora do estado RUNNING não muda nada."""
        if self.state != GameState.RUNNING:
            return self.render_state()

        game_over = False

        # física do pássaro
        self.bird.update()
        if self.bird.y >= BOARD_HEIGHT:
            game_over = True

        # move canos, pontua e testa colisão
        for pipe in self.pipes:
            pipe.update(self.velocity_x)
            if not pipe.passed and self.bird.x > pipe.right:
                self.score += SCORE_PER_PIPE
                pipe.passed = True
            if detect_collision(self.bird, pipe):
                game_over = True

        # remove da cabeça os canos que já saíram da tela
        while self.pipes and self.pipes[0].is_expired():
            self.pipes.popleft()

        if game_over:
            self.finish()

        return self.render_state()

    # ----------------- game over -----------------
    def finish(self):
        """Marca fim de jogo e grava o recorde se ele foi batido. Retorna True se houve recorde."""
        if self.state == GameState.OVER:
            return False
        self.state = GameState.OVER
        final = self.display_score
        print(f"Game over! Score: {final}")
        if final > self.highest_score:
            self.highest_score = final
            self.store.set(HIGHSCORE_KEY, final)
            print(f"Novo recorde: {final}")
            return True
        return False

    def render_state(self):
        pipes = [(p.role, (p.x, p.y, p.width, p.height)) for p in self.pipes]
        bird_rect = (self.bird.x, self.bird.y, self.bird.width, self.bird.height)
        return RenderState(bird_rect, self.bird.frame, pipes,
                           self.display_score, self.highest_score, self.state)
