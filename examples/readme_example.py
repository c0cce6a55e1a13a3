import asyncio

from typesalad import (
    Overloadable,
    SaladFloat,
    SaladInt,
    SaladString,
    SaladVec2,
    SystemEvent,
    TypeTag,
    generic_list,
    get_system,
    typed_if,
)
from typesalad.packages import ImagInt

shapes = Overloadable()


@shapes.overload("area", TypeTag.INT)
def square(side: SaladInt) -> SaladInt:
    return SaladInt(side.raw_value() ** 2)


@shapes.overload("area", TypeTag.INT, TypeTag.INT)
def rectangle(width: SaladInt, height: SaladInt) -> SaladInt:
    return SaladInt(width.raw_value() * height.raw_value())


@shapes.overload("area", TypeTag.FLOAT)
def circle(radius: SaladFloat) -> SaladFloat:
    return SaladFloat(3.14159 * radius.raw_value() ** 2)


async def main() -> None:
    system = get_system()
    system.on(SystemEvent.PACKAGE_USED, lambda name: print(f"(enabled {name})"))

    await system.use_builtin("SaladMath")
    await system.use_builtin("SaladLinq")

    # Overloads pick the implementation by argument tags
    for args in [(SaladInt(3),), (SaladInt(2), SaladInt(5)), (SaladFloat(1.0),)]:
        system.print(system.concat(SaladString("area = "), shapes.call_overload("area", *args).render()))

    # Typed arithmetic
    z = system.math.sum(ImagInt(SaladInt(1), SaladInt(2)), ImagInt(SaladInt(3), SaladInt(-5)))
    system.print(z.render())

    # Typed equality branches
    origin = SaladVec2(0, 0)
    typed_if(
        origin,
        SaladVec2(0, 0),
        lambda: system.print(SaladString("at origin")),
        lambda: system.print(SaladString("elsewhere")),
    )

    # Queries and homogeneous lists
    names = generic_list(TypeTag.STRING)(SaladString("kale"), SaladString("arugula"), SaladString("endive"))
    longest = system.linq.new_query(names).order_by(key=lambda s: len(s.raw_value()), reverse=True).take(1)
    system.print(longest.to_list()[0].render())

    # Typed storage keeps each key's tag
    system.store("servings", SaladInt(2))
    system.store("servings", SaladInt(4))
    system.print(SaladString(f"servings = {system.retrieve('servings')}"))


if __name__ == "__main__":
    asyncio.run(main())
