# flappy/game.py
# Janela, relógios, entrada e desenho do Flappy.
# - frame: clock.tick(FPS) -> Simulation.step() uma vez por frame enquanto RUNNING
# - canos: pygame.time.set_timer(SPAWN_PIPES_EVENT, 1500) -> Simulation.spawn_pipes()
# - game over: cancela o timer de canos e para de chamar step()
#
import pygame

from flappy.simulation import (Simulation, GameState, BOARD_WIDTH, BOARD_HEIGHT,
                               PIPE_SPAWN_INTERVAL_MS)
from flappy.storage import HighScoreStore

# ----------------- Configurações -----------------
FPS = 60
FONT_NAME = "arial"
SKY_COLOR = (112, 197, 206)

SPAWN_PIPES_EVENT = pygame.USEREVENT + 1

BUTTON_W, BUTTON_H = 100, 50


# ----------------- botões (hit-test) -----------------
def start_button_rect():
    # x em [W/2-50, W/2+50], y em [H/2-30, H/2+20]
    return pygame.Rect(BOARD_WIDTH // 2 - BUTTON_W // 2, BOARD_HEIGHT // 2 - 30, BUTTON_W, BUTTON_H)


def restart_button_rect():
    # mesmo x, logo abaixo do START: y em [H/2+20, H/2+70]
    return pygame.Rect(BOARD_WIDTH // 2 - BUTTON_W // 2, BOARD_HEIGHT // 2 + 20, BUTTON_W, BUTTON_H)


def hit_test(rect, pos):
    """Limites inclusivos (Rect.collidepoint exclui a borda direita/inferior)."""
    x, y = pos
    return rect.left <= x <= rect.right and rect.top <= y <= rect.bottom


# ----------------- Game class -----------------
class Game:
    def __init__(self, store=None, simulation=None):
        pygame.init()

        # janela e clock
        self.screen = pygame.display.set_mode((BOARD_WIDTH, BOARD_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.running = True

        self.store = store if store is not None else HighScoreStore()
        self.sim = simulation if simulation is not None else Simulation(self.store)
        self.spawn_timer_armed = False

        # fonts
        self.font_hud = pygame.font.SysFont(FONT_NAME, 45)
        self.font_button = pygame.font.SysFont(FONT_NAME, 20)

        self.start_button = start_button_rect()
        self.restart_button = restart_button_rect()

    # ----------------- relógios -----------------
    def arm_spawn_timer(self):
        pygame.time.set_timer(SPAWN_PIPES_EVENT, PIPE_SPAWN_INTERVAL_MS)
        self.spawn_timer_armed = True

    def cancel_spawn_timer(self):
        pygame.time.set_timer(SPAWN_PIPES_EVENT, 0)
        self.spawn_timer_armed = False

    # ----------------- game start -----------------
    def start_game(self):
        self.sim.start()
        self.arm_spawn_timer()
        print(f"Jogo iniciado (recorde: {self.sim.highest_score})")

    def restart_game(self):
        # cancela os relógios antigos antes de reiniciar
        self.cancel_spawn_timer()
        self.start_game()

    def finish_game(self):
        self.cancel_spawn_timer()

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            self.clock.tick(FPS)

            # events
            self.handle_events()

            # game update
            self.update()

            # draw current frame
            self.draw()

        self.quit()

    def update(self):
        if self.sim.state != GameState.RUNNING:
            return
        self.sim.step()
        if self.sim.state == GameState.OVER:
            self.finish_game()

    # ----------------- events -----------------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.handle_event(event)

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
            return

        # route events by state
        state = self.sim.state
        if state == GameState.NOT_STARTED:
            self._handle_menu_event(event)
        elif state == GameState.RUNNING:
            self._handle_playing_event(event)
        else:
            self._handle_game_over_event(event)

    def _handle_menu_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self.start_game()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if hit_test(self.start_button, event.pos):
                self.start_game()

    def _handle_playing_event(self, event):
        if event.type == SPAWN_PIPES_EVENT:
            self.sim.spawn_pipes()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_UP):
            self.sim.jump()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.sim.jump()

    def _handle_game_over_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self.restart_game()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if hit_test(self.restart_button, event.pos):
                self.restart_game()

    # ----------------- draw -----------------
    def draw(self):
        self.screen.fill(SKY_COLOR)
        frame = self.sim.render_state()

        if frame.state != GameState.NOT_STARTED:
            self._draw_sprites()
            self._draw_hud(frame.score, frame.highest_score)

        if frame.state == GameState.NOT_STARTED:
            self._draw_button(self.start_button, "Start", (0, 0, 255))
        elif frame.state == GameState.OVER:
            self._draw_game_over()

        pygame.display.flip()

    def _draw_sprites(self):
        # canos primeiro, pássaro por cima
        for pipe in self.sim.pipes:
            self.screen.blit(pipe.image, pipe.rect)
        self.screen.blit(self.sim.bird.image, self.sim.bird.rect)

    def _draw_hud(self, score, highest_score):
        score_surf = self.font_hud.render(f"Score: {score}", True, (255, 255, 255))
        best_surf = self.font_hud.render(f"Best: {highest_score}", True, (255, 255, 255))
        self.screen.blit(score_surf, (5, 5))
        self.screen.blit(best_surf, (5, 50))

        pygame.display.set_caption(f"Flappy Bird — FPS: {int(self.clock.get_fps())}")

    def _draw_button(self, rect, label, color):
        pygame.draw.rect(self.screen, color, rect)
        text = self.font_button.render(label, True, (255, 255, 255))
        self.screen.blit(text, text.get_rect(center=rect.center))

    def _draw_game_over(self):
        text = self.font_hud.render("GAME OVER", True, (255, 255, 255))
        self.screen.blit(text, text.get_rect(center=(BOARD_WIDTH // 2, BOARD_HEIGHT // 2 - 30)))
        self._draw_button(self.restart_button, "Restart", (255, 0, 0))

    # ----------------- quit -----------------
    def quit(self):
        self.cancel_spawn_timer()
        pygame.quit()
