"""Sprite catalogue: one generation request per game asset."""

from pydantic import BaseModel, Field, field_validator

STYLE = "16-bit pixel art, clean pixels"
BACKGROUND = "Transparent or magenta (#FF00FF)"


class SpriteSpec(BaseModel):
    """A single named generation request."""

    name: str = Field(..., min_length=1, description="Identifier used in logs and --only")
    filename: str = Field(..., min_length=1, description="Output file name inside the assets dir")
    prompt: str = Field(..., min_length=1, description="Instruction sent verbatim to the model")

    model_config = {"frozen": True}

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Filenames must not point outside the assets directory."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"filename must be a bare file name, got {v!r}")
        return v

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt must not be blank")
        return v


def enemy_prompt(role: str, character: str, frames: str) -> str:
    """Prompt for a 4-frame 32x32 enemy strip."""
    return f"""Create a pixel art sprite sheet for {role} in a 2D platformer game.

Requirements:
- Style: {STYLE}
- Character: {character}
- Layout: Horizontal strip with 4 frames, each 32x32 pixels
- Frames: {frames}
- Background: {BACKGROUND}
- Total size: 128x32 pixels"""


DINO_PROMPT = f"""Create a pixel art sprite sheet for a cute green dinosaur character for a 2D platformer game.

Requirements:
- Style: {STYLE}, no anti-aliasing
- Character: Small green T-Rex dinosaur, friendly appearance, big eyes
- Layout: Horizontal strip with 7 frames, each frame 32x32 pixels
- Frames from left to right:
  1. Idle pose (standing)
  2. Run frame 1 (left foot forward)
  3. Run frame 2 (right foot forward)
  4. Jump pose (legs tucked, arms up)
  5. Attack pose (mouth open, lunging forward)
  6. Attack frame 2 (bite animation)
  7. Hurt/hit pose
- Background: Transparent or solid magenta (#FF00FF) for easy removal
- Colors: Bright green body, lighter green belly, white eyes with black pupils
- Total image size: 224x32 pixels (7 frames x 32 pixels each)"""

TILES_PROMPT = f"""Create a pixel art tileset for a 2D platformer game.

Requirements:
- Style: {STYLE}
- Layout: Horizontal strip with 6 tiles, each 32x32 pixels
- Tiles from left to right:
  1. Ground/floor tile (brown dirt/stone, textured top edge)
  2. Platform tile (wooden plank or stone block)
  3. Ice/snow tile (light blue/white, crystalline)
  4. Space/metal tile (dark purple/gray, sci-fi look)
  5. Lava/volcano tile (dark rock with orange glow)
  6. Grass variation (green grass on dirt)
- Background: {BACKGROUND}
- Total size: 192x32 pixels"""

EGG_PROMPT = f"""Create a pixel art collectible egg sprite for a 2D platformer game.

Requirements:
- Style: {STYLE}, cute
- Single frame: 16x16 pixels
- Design: Golden/yellow speckled dinosaur egg with shine highlights
- Should look valuable and collectible
- Background: {BACKGROUND}"""

HEART_PROMPT = f"""Create a pixel art heart/life pickup sprite for a 2D platformer game.

Requirements:
- Style: {STYLE}
- Single frame: 16x16 pixels
- Design: Bright pink/red heart with shine highlight, looks like health pickup
- Background: {BACKGROUND}"""

POWERUPS_PROMPT = f"""Create a pixel art powerup sprite sheet for a 2D platformer game.

Requirements:
- Style: {STYLE}
- Layout: Horizontal strip with 5 powerups, each 24x24 pixels
- Powerups from left to right:
  1. Speed boost (blue lightning bolt or running shoe)
  2. Invincibility (golden star or shield)
  3. Shield (cyan bubble or force field icon)
  4. Double jump (magenta wings or spring)
  5. Magnet (orange magnet or swirl)
- Each should be instantly recognizable
- Background: {BACKGROUND}
- Total size: 120x24 pixels"""

CHECKPOINT_PROMPT = f"""Create a pixel art checkpoint flag sprite for a 2D platformer game.

Requirements:
- Style: {STYLE}
- Layout: 2 frames side by side, each 32x48 pixels
- Frame 1: Inactive checkpoint (gray/white flag on pole)
- Frame 2: Active checkpoint (green glowing flag on pole)
- Flag should wave slightly between frames
- Background: {BACKGROUND}
- Total size: 64x48 pixels"""

EXIT_PROMPT = f"""Create a pixel art exit portal/door sprite for a 2D platformer game.

Requirements:
- Style: {STYLE}
- Single frame: 32x64 pixels (tall doorway)
- Design: Glowing cyan/teal portal or doorway with swirling energy effect
- Should look like the goal/finish of a level
- Background: {BACKGROUND}"""

PROJECTILE_PROMPT = f"""Create a pixel art projectile sprite for enemy attacks in a 2D platformer game.

Requirements:
- Style: {STYLE}
- Single frame: 12x12 pixels
- Design: Green energy ball or seed projectile with glow effect
- Should look dangerous but small
- Background: {BACKGROUND}"""


SPRITE_SPECS: tuple[SpriteSpec, ...] = (
    # Player
    SpriteSpec(name="dino-new", filename="dino-new.png", prompt=DINO_PROMPT),
    # Enemies
    SpriteSpec(
        name="enemy-basic",
        filename="enemy-basic.png",
        prompt=enemy_prompt(
            "a basic enemy creature",
            "Red slime/blob monster, angry eyes, simple but menacing",
            "Idle, walk 1, walk 2, hurt",
        ),
    ),
    SpriteSpec(
        name="enemy-fast",
        filename="enemy-fast.png",
        prompt=enemy_prompt(
            "a fast enemy creature",
            "Yellow bat or flying insect, small and zippy looking, angry expression",
            "Flying idle, wing flap 1, wing flap 2, hurt",
        ),
    ),
    SpriteSpec(
        name="enemy-tank",
        filename="enemy-tank.png",
        prompt=enemy_prompt(
            "a tank/heavy enemy",
            "Brown armored beetle or turtle, big and sturdy, armored shell",
            "Idle, walk 1, walk 2, hurt (shell crack)",
        ),
    ),
    SpriteSpec(
        name="enemy-flying",
        filename="enemy-flying.png",
        prompt=enemy_prompt(
            "a flying enemy",
            "Purple ghost or phantom, floaty and ethereal, glowing eyes",
            "Float 1, float 2, float 3, hurt/fade",
        ),
    ),
    SpriteSpec(
        name="enemy-shooter",
        filename="enemy-shooter.png",
        prompt=enemy_prompt(
            "a ranged shooter enemy",
            "Green plant/flower enemy that shoots, like a venus flytrap or cactus with eyes",
            "Idle, charging shot, shooting, hurt",
        ),
    ),
    # Tiles
    SpriteSpec(name="tiles-new", filename="tiles-new.png", prompt=TILES_PROMPT),
    # Collectibles and level objects
    SpriteSpec(name="egg", filename="egg-new.png", prompt=EGG_PROMPT),
    SpriteSpec(name="heart", filename="heart-new.png", prompt=HEART_PROMPT),
    SpriteSpec(name="powerups", filename="powerups-new.png", prompt=POWERUPS_PROMPT),
    SpriteSpec(name="checkpoint", filename="checkpoint-new.png", prompt=CHECKPOINT_PROMPT),
    SpriteSpec(name="exit", filename="exit-new.png", prompt=EXIT_PROMPT),
    SpriteSpec(name="projectile", filename="projectile-new.png", prompt=PROJECTILE_PROMPT),
)


def select_specs(
    names: list[str] | None = None,
    specs: tuple[SpriteSpec, ...] = SPRITE_SPECS,
) -> list[SpriteSpec]:
    """Filter the catalogue by name, keeping catalogue order.

    Raises:
        KeyError: If a requested name is not in the catalogue
    """
    if not names:
        return list(specs)

    known = {spec.name for spec in specs}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise KeyError(", ".join(unknown))

    wanted = set(names)
    return [spec for spec in specs if spec.name in wanted]
