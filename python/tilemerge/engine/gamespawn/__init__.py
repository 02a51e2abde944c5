from tilemerge.engine.gamespawn.spawner import TileSpawner

__all__ = ["TileSpawner"]
