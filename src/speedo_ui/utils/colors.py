WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
YELLOW = (255, 235, 59, 255)
BLUE = (33, 150, 243, 255)

# 25% black, used for the unfilled part of the dial
TRANSLUCENT_BLACK = (0, 0, 0, 64)
