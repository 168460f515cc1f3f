import itertools

import pygame

from shooter.geometry import arena_rect, overlaps


def test_overlap_with_shared_area():
    assert overlaps(pygame.Rect(0, 0, 10, 10), pygame.Rect(9, 9, 10, 10))


def test_edge_touching_is_not_overlap():
    a = pygame.Rect(0, 0, 10, 10)
    assert not overlaps(a, pygame.Rect(10, 0, 10, 10))
    assert not overlaps(a, pygame.Rect(0, 10, 10, 10))
    assert not overlaps(a, pygame.Rect(10, 10, 10, 10))


def test_containment_overlaps():
    assert overlaps(pygame.Rect(0, 0, 50, 50), pygame.Rect(20, 20, 5, 5))


def test_overlap_is_symmetric():
    rects = [
        pygame.Rect(0, 0, 10, 10),
        pygame.Rect(5, 5, 10, 10),
        pygame.Rect(10, 0, 10, 10),
        pygame.Rect(-5, -5, 6, 6),
        pygame.Rect(100, 100, 50, 50),
        pygame.Rect(120, 90, 10, 100),
    ]
    for a, b in itertools.product(rects, repeat=2):
        assert overlaps(a, b) == overlaps(b, a), (a, b)


def test_arena_rect_defaults():
    assert arena_rect() == pygame.Rect(0, 0, 800, 600)
