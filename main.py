# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo para separar inicialização da lógica do jogo em flappy/game.py.

from flappy.game import Game

if __name__ == "__main__":
    # Criamos a instância do jogo e chamamos run(), que contém o loop principal.
    game = Game()
    game.run()
