"""
Animal Edit View - add or edit an animal, with an optional photo.

Widgets live outside st.form so that changing the category reloads the
breed list right away.
"""

from typing import Optional

import streamlit as st

from config.auth import get_session, require_login
from controllers.animal_edit_controller import AnimalEditController
from controllers.base import Page
from models.filters import GENDER_OPTIONS, SIZE_OPTIONS
from services.animal_service import AnimalService
from services.api_client import FilePart, get_api_client
from services.catalog_service import CatalogService
from views.components.layout import render_page_chrome
from views.components.navigation import edit_animal_id, go_to, is_page_entry

FORM_VERSION_KEY = "animal_edit_form_version"


def _select_id(label: str, records: list, current: Optional[int], key: str) -> Optional[int]:
    ids = [None] + [r.id for r in records]
    names = {r.id: r.name for r in records}
    return st.selectbox(
        label,
        ids,
        index=ids.index(current) if current in ids else 0,
        format_func=lambda i: "Select..." if i is None else names.get(i, str(i)),
        key=key,
    )


def _select_enum(label: str, options: dict[str, str], current: Optional[str], key: str) -> Optional[str]:
    values = [None] + list(options.values())
    labels = {v: k for k, v in options.items()}
    return st.selectbox(
        label,
        values,
        index=values.index(current) if current in values else 0,
        format_func=lambda v: "Select..." if v is None else labels[v],
        key=key,
    )


class AnimalEditView:
    """View for the Add/Edit Animal page."""

    def __init__(self):
        self.session = get_session()
        client = get_api_client()
        self.controller = AnimalEditController(
            self.session,
            AnimalService(client),
            CatalogService(client),
        )

    def render(self):
        """Main render method."""
        require_login(self.session)

        animal_id = edit_animal_id()
        if is_page_entry(Page.EDIT_ANIMAL):
            # Fresh widget keys, so the widgets start from the loaded form
            st.session_state[FORM_VERSION_KEY] = st.session_state.get(FORM_VERSION_KEY, 0) + 1
            with st.spinner("Loading..."):
                self.controller.load_form(animal_id)
        else:
            self.controller.ensure_loaded(animal_id)

        render_page_chrome(self.session, self.controller)
        if self.controller.load_failed:
            st.page_link(Page.MY_ANIMALS, label="← Back to my animals")
            return
        st.title("Add an animal" if self.controller.form.is_new else "Edit animal")

        self._render_form(st.session_state.get(FORM_VERSION_KEY, 0))

    def _render_form(self, version: int):
        c = self.controller
        form = c.form

        name = st.text_input("Name", value=form.name or "", key=f"edit_name_{version}")

        col1, col2 = st.columns(2)
        with col1:
            category_id = _select_id("Category", c.categories, form.category_id, f"edit_category_{version}")
        if category_id != form.category_id:
            c.on_category_change(category_id)
        with col2:
            breed_id = _select_id(
                "Breed",
                c.breeds,
                form.breed_id,
                f"edit_breed_{version}_{form.category_id}",
            )

        col3, col4, col5 = st.columns(3)
        with col3:
            gender = _select_enum("Gender", GENDER_OPTIONS, form.gender, f"edit_gender_{version}")
        with col4:
            size = _select_enum("Size", SIZE_OPTIONS, form.size, f"edit_size_{version}")
        with col5:
            birthday = st.date_input(
                "Birthday",
                value=form.birthday,
                format="YYYY-MM-DD",
                key=f"edit_birthday_{version}",
            )

        short_description = st.text_input(
            "Short description",
            value=form.short_description or "",
            key=f"edit_short_{version}",
        )
        long_description = st.text_area(
            "Long description",
            value=form.long_description or "",
            key=f"edit_long_{version}",
        )

        if form.image:
            st.caption(f"Current photo: {form.image}")
        upload = st.file_uploader(
            "Photo",
            type=["png", "jpg", "jpeg", "gif", "webp"],
            key=f"edit_image_{version}",
        )

        c.update_form(
            name=name,
            breed_id=breed_id,
            gender=gender,
            size=size,
            birthday=birthday,
            short_description=short_description or None,
            long_description=long_description or None,
        )

        st.markdown("---")
        col_save, col_cancel = st.columns(2)
        with col_save:
            if st.button("Save", type="primary", use_container_width=True):
                image = None
                if upload is not None:
                    image = FilePart(filename=upload.name, content=upload.getvalue(), content_type=upload.type)
                with st.spinner("Saving..."):
                    target = c.submit(image)
                go_to(target)
        with col_cancel:
            if st.button("Cancel", use_container_width=True):
                st.switch_page(Page.MY_ANIMALS)
