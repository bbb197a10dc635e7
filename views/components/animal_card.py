"""
Animal display components.
"""

import streamlit as st
from typing import Callable, Optional

from models import AnimalRecord
from models.filters import GENDER_OPTIONS, SIZE_OPTIONS, label_for


def render_animal_card(
    animal: AnimalRecord,
    image_url: Optional[str],
    on_open: Callable[[int], None],
    key_prefix: str = "animal",
):
    """
    Render one animal as a card for the listing grid.

    Args:
        animal: The animal to show
        image_url: Resolved image URL, or None for no image
        on_open: Callback with the animal id when "View" is clicked
        key_prefix: Widget key prefix, unique per page
    """
    with st.container(border=True):
        if image_url:
            st.image(image_url, use_container_width=True)
        st.markdown(f"### {animal.name or 'Unnamed'}")

        details = [
            animal.display_category,
            animal.display_breed,
            label_for(GENDER_OPTIONS, animal.gender),
            animal.age_description,
        ]
        st.caption(" · ".join(d for d in details if d))

        if animal.short_description:
            st.markdown(animal.short_description)
        if animal.adopted:
            st.success("Adopted")

        if animal.id is not None:
            if st.button("View", key=f"{key_prefix}_view_{animal.id}", use_container_width=True):
                on_open(animal.id)


def render_animal_details(animal: AnimalRecord, image_url: Optional[str]):
    """Render the full details of one animal."""
    col_image, col_info = st.columns([1, 2])

    with col_image:
        if image_url:
            st.image(image_url, use_container_width=True)
        else:
            st.markdown("*No photo*")

    with col_info:
        st.title(animal.name or "Unnamed")
        if animal.adopted:
            st.success("This animal has been adopted.")

        rows = [
            ("Category", animal.display_category),
            ("Breed", animal.display_breed),
            ("Gender", label_for(GENDER_OPTIONS, animal.gender)),
            ("Size", label_for(SIZE_OPTIONS, animal.size)),
            ("Age", animal.age_description),
            ("Birthday", animal.birthday.isoformat() if animal.birthday else None),
        ]
        for label, value in rows:
            if value:
                st.markdown(f"**{label}:** {value}")

        if animal.short_description:
            st.markdown(f"_{animal.short_description}_")
        if animal.long_description:
            st.markdown(animal.long_description)

        owner = [animal.owner_name, animal.owner_email, animal.owner_phone]
        if any(owner):
            st.markdown("---")
            st.markdown("**Listed by**")
            st.markdown("  \n".join(o for o in owner if o))
